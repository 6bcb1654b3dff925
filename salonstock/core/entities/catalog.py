"""Catalog domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProductUsage(str, Enum):
    """How a product is consumed in the salon."""

    PROFESSIONAL = "professional"  # used on clients during treatments
    RETAIL = "retail"  # sold over the counter


class Product(BaseModel):
    """Catalog facts for a product. Edited only through catalog management."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    barcode: str  # unique per catalog
    supplier_id: str  # default ordering supplier
    cost_price: float = Field(default=0.0, ge=0)
    category_id: str | None = None
    usage: ProductUsage = ProductUsage.PROFESSIONAL
    description: str | None = None
    image_url: str | None = None
    last_updated: datetime = Field(default_factory=datetime.utcnow)


class Supplier(BaseModel):
    """A vendor that purchase orders are sent to."""

    id: str
    name: str
    contact_person: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    line_id: str | None = None
