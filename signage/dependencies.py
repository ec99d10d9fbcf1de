from typing import AsyncIterator

import httpx
from fastapi import Request

from signage.config import settings
from signage.core.exceptions import MalformedInputException


async def get_upstream_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    FastAPI dependency for outbound integration calls.

    One client per request; tests override this with a client backed by
    httpx.MockTransport.
    """
    async with httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT_SECONDS) as client:
        yield client


async def read_json_body(request: Request) -> dict:
    """
    Parse the request body as a JSON object.

    An empty body is treated as {} so the dispatcher reports the missing
    action instead of a parse error.

    Raises:
        MalformedInputException: If the body is not valid JSON or not an object
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = await request.json()
    except ValueError:
        raise MalformedInputException("Request body is not valid JSON")
    if not isinstance(body, dict):
        raise MalformedInputException("Request body must be a JSON object")
    return body
