"""
Pydantic schemas for product records.

A product has an integer ``id`` chosen by the client, a ``title``, a
``sku`` and a ``price`` expressed in the smallest currency unit.  Only
``id`` is required on creation because it is the lookup key; any
other JSON keys sent by the client are kept verbatim and echoed back.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A single product record as held by the store."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., strict=True, description="Client supplied identifier")
    title: Optional[str] = Field(None, description="Display name")
    sku: Optional[str] = Field(None, description="Stock keeping unit")
    price: Optional[int] = Field(None, strict=True, description="Price in the smallest currency unit")

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as sent by the client, without unset fields."""
        return self.model_dump(exclude_unset=True)


class ProductUpdate(BaseModel):
    """Schema for a partial update.

    All fields are optional.  Use ``changes()`` to get the fields that
    were actually supplied: a field that is absent or ``null`` is not a
    change, while ``0`` or ``""`` is.
    """

    title: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[int] = Field(None, strict=True)

    def changes(self) -> Dict[str, Any]:
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
