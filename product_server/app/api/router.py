"""
Top-level router.

Routes are matched in the order they are included here and the first
match wins.  Requests that match nothing (or match a path with the
wrong method) fall through to the 404 page registered in
``core.errors``.
"""

from fastapi import APIRouter

from .endpoints import pages, static, products

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(static.router, tags=["static"])
router.include_router(products.router, prefix="/products", tags=["products"])
