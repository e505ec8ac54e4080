"""
Fixed content endpoints.

These routes show the different response types the server can
produce: an HTML home page, a plain text body, a constant JSON object
and an echo endpoint that derives a few values from the ``input``
query parameter.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

router = APIRouter()


HOME_PAGE_HTML = """
<h1>Python HTTP Server | Routing</h1>
<div>
    <ul>
        <li>
            <a href="/">Home</a>
        </li>
        <li>
            <a href="/plain-text">Plain Text</a>
        </li>
        <li>
            <a href="/json">JSON</a>
        </li>
        <li>
            <a href="/echo?input=Python">Echo</a>
        </li>
        <li>
            <a href="/static/index.html">Static Page</a>
        </li>
        <li>
            <a href="/products">Products</a>
        </li>
    </ul>
</div>
"""

PLAIN_TEXT = "This is a plain text response."

DEFAULT_ECHO_INPUT = "Hello"


@router.get("/", response_class=HTMLResponse)
@router.get("/home", response_class=HTMLResponse)
async def home() -> str:
    """Return the home page with links to the other routes."""
    return HOME_PAGE_HTML


@router.get("/plain-text", response_class=PlainTextResponse)
async def plain_text() -> str:
    return PLAIN_TEXT


@router.get("/json")
async def json_greeting() -> Dict[str, str]:
    return {"greetings": "Hello from the Product Server!"}


@router.get("/echo")
async def echo(text: Optional[str] = Query(None, alias="input")) -> Dict[str, Any]:
    """Echo ``input`` back in a few shapes.

    An absent or empty ``input`` is treated as ``"Hello"``.  When the
    parameter is repeated, the last value wins.
    """
    text = text or DEFAULT_ECHO_INPUT
    return {
        "normal": text,
        "shouty": text.upper(),
        "characterCount": len(text),
        "backwards": text[::-1],
    }
