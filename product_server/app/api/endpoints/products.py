"""
Product endpoints.

These routes expose a CRUD API over the in-memory product store.  The
resource path stays the same and the HTTP verb selects the operation:

* ``GET /products`` lists every product.
* ``POST /products`` stores a new product.
* ``GET /products/{id}`` returns a single product.
* ``PATCH /products/{id}`` updates some fields of a product.
* ``DELETE /products/{id}`` removes a product.

The ``{id}`` segment must be a plain base-10 integer (an optional
leading minus is allowed).  Any other segment does not address a
product and gets the generic 404 page instead of a JSON answer.
"""

import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from product_server.app.api.deps import get_settings, get_store, read_json_body
from product_server.app.core.config import Settings
from product_server.app.core.errors import InvalidBody
from product_server.app.schemas.product import Product, ProductUpdate
from product_server.app.services.product_store import ProductStore

router = APIRouter()

PRODUCT_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_product_id(segment: str) -> int:
    """Convert the id path segment to an int or raise a routing 404."""
    if not PRODUCT_ID_PATTERN.fullmatch(segment):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return int(segment)


def not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"status": "Not Found"})


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
        for error in exc.errors()
    )


async def _read_object(request: Request, app_settings: Settings) -> Dict[str, Any]:
    data = await read_json_body(request, app_settings.max_body_bytes)
    if not isinstance(data, dict):
        raise InvalidBody("Request body must be a JSON object")
    return data


@router.get("")
async def list_products(store: ProductStore = Depends(get_store)) -> Dict[str, Any]:
    return {"status": "OK", "products": [p.to_dict() for p in store.all()]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    store: ProductStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, str]:
    """Store the product sent in the request body.

    The body must be a JSON object with an integer ``id``.  The id is
    not checked against existing products.
    """
    data = await _read_object(request, app_settings)
    try:
        product = Product.model_validate(data)
    except ValidationError as exc:
        raise InvalidBody(_validation_message(exc)) from exc
    store.add(product)
    return {"status": "Created", "message": "Product created successfully"}


@router.get("/{product_id}")
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    product = store.get_by_id(parse_product_id(product_id))
    if product is None:
        return not_found()
    return {"status": "OK", "product": product.to_dict()}


@router.patch("/{product_id}")
async def update_product(
    product_id: str,
    request: Request,
    store: ProductStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
):
    """Update ``title``, ``sku`` and/or ``price`` of a product.

    Fields left out of the body, or sent as ``null``, keep their
    current value.  The body is read and decoded before the product is
    looked up.
    """
    parsed_id = parse_product_id(product_id)
    data = await _read_object(request, app_settings)
    try:
        partial = ProductUpdate.model_validate(data)
    except ValidationError as exc:
        raise InvalidBody(_validation_message(exc)) from exc
    if not store.update(parsed_id, partial):
        return not_found()
    return {"status": "OK"}


@router.delete("/{product_id}")
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    if not store.remove(parse_product_id(product_id)):
        return not_found()
    return {"status": "OK"}
