import httpx
from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from signage.actions import registry
from signage.actions.dispatcher import ActionDispatcher
from signage.config import settings
from signage.database import get_db
from signage.dependencies import get_upstream_http_client, read_json_body

router = APIRouter()


@router.post("/{resource}")
async def dispatch_action(
    resource: str,
    body: dict = Depends(read_json_body),
    authorization: str | None = Header(default=None),
    device_token: str | None = Header(default=None, alias=settings.DEVICE_TOKEN_HEADER),
    db: Session = Depends(get_db),
    http_client: httpx.AsyncClient = Depends(get_upstream_http_client),
):
    """Run `body["action"]` against the resource for the calling tenant"""
    dispatcher = ActionDispatcher(registry, db, http_client)
    envelope = await dispatcher.dispatch(resource, body, authorization, device_token)
    return envelope.to_body()
