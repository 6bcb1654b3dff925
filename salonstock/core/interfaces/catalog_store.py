"""Abstract interfaces for the product catalog."""

from abc import ABC, abstractmethod

from salonstock.core.entities.catalog import Product, Supplier


class ICatalogReader(ABC):
    """Read side of the catalog used by purchasing."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID."""
        pass

    @abstractmethod
    async def get_product_cost(self, product_id: str) -> float | None:
        """Get the product's current cost price, None if the product is unknown."""
        pass

    @abstractmethod
    async def get_supplier(self, supplier_id: str) -> Supplier | None:
        """Get supplier by ID."""
        pass

    @abstractmethod
    async def list_products(
        self,
        supplier_id: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Product]:
        """List products, optionally for one supplier, ordered by name."""
        pass


class ICatalogStore(ICatalogReader):
    """Catalog persistence. Writes are owned by catalog management."""

    @abstractmethod
    async def create_product(self, product: Product) -> Product:
        """Create a new product."""
        pass

    @abstractmethod
    async def get_product_by_barcode(self, barcode: str) -> Product | None:
        """Get product by barcode."""
        pass

    @abstractmethod
    async def create_supplier(self, supplier: Supplier) -> Supplier:
        """Create a new supplier."""
        pass

    @abstractmethod
    async def list_suppliers(self) -> list[Supplier]:
        """List all suppliers ordered by name."""
        pass
