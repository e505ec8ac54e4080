"""
Request dependencies shared by the endpoint modules.

The store and the settings live on ``app.state`` (see ``create_app``)
and are handed to handlers through ``Depends`` so that every app
instance, and every test, works on its own objects.
"""

import json
from typing import Any

from fastapi import Request

from product_server.app.core.config import Settings
from product_server.app.core.errors import InvalidBody, PayloadTooLarge
from product_server.app.services.product_store import ProductStore


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_json_body(request: Request, limit: int) -> Any:
    """Buffer the whole request body and decode it as JSON.

    The body is read chunk by chunk and abandoned as soon as it grows
    past ``limit`` bytes.  Raises ``PayloadTooLarge`` or ``InvalidBody``;
    nothing is returned until the complete body has been decoded.
    """
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLarge(f"Request body exceeds {limit} bytes")

    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise PayloadTooLarge(f"Request body exceeds {limit} bytes")
        chunks.append(chunk)

    try:
        return json.loads(b"".join(chunks).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidBody(f"Request body is not valid JSON: {exc}") from exc
