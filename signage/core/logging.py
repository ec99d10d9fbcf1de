import logging

from signage.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Route all application loggers through the root handler at LOG_LEVEL."""
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)

    # httpx logs full request URLs at INFO; keep it quiet unless debugging
    if resolved != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
