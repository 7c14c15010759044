"""
Product catalog.

Read-only collaborator of the cart: maps product id to name and price.
"""

from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from storefront.logging import get_logger

logger = get_logger(__name__)


class Product(BaseModel):
    """Single catalog entry. Prices are integer minor units."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    price_minor_units: int = Field(..., ge=0)
    description: str = ""


# HR products offered on the site
DEFAULT_PRODUCTS: tuple[dict, ...] = (
    {
        "id": "hr-policy-kit",
        "name": "HR Policy Starter Kit",
        "price_minor_units": 249,
        "description": "Editable core policies for a growing team.",
    },
    {
        "id": "org-design-pack",
        "name": "Org Design Pack",
        "price_minor_units": 299,
        "description": "Structure charts, role maps and spans-of-control checks.",
    },
    {
        "id": "hr-kpis-dashboard",
        "name": "HR KPIs Dashboard",
        "price_minor_units": 349,
        "description": "Turnover, hiring and headcount metrics in one sheet.",
    },
    {
        "id": "recruitment-toolkit",
        "name": "Recruitment Toolkit",
        "price_minor_units": 199,
        "description": "Job description, scorecard and interview templates.",
    },
    {
        "id": "compensation-review",
        "name": "Compensation Review Template",
        "price_minor_units": 279,
        "description": "Salary bands and a review cycle workbook.",
    },
    {
        "id": "learning-plan",
        "name": "Learning & Capability Plan",
        "price_minor_units": 179,
        "description": "Skills matrix and a yearly learning calendar.",
    },
)


class Catalog:
    """Immutable lookup of products by id, in display order."""

    def __init__(self, products: Iterable[Product]):
        self._products: dict[str, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id: {product.id}")
            self._products[product.id] = product

    @classmethod
    def from_dicts(cls, rows: Iterable[dict]) -> "Catalog":
        """Validate raw rows (e.g. from a config file) into a catalog."""
        return cls(Product.model_validate(row) for row in rows)

    def get(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)


def default_catalog() -> Catalog:
    """Build the site's product catalog."""
    catalog = Catalog.from_dicts(DEFAULT_PRODUCTS)
    logger.debug(f"Loaded catalog with {len(catalog)} products")
    return catalog


__all__ = ["Product", "Catalog", "DEFAULT_PRODUCTS", "default_catalog"]
