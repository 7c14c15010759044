"""Cart projection models (what the display layer receives)."""
from dataclasses import dataclass, field
from typing import List

from storefront.config import CURRENCY
from storefront.errors import CART_EMPTY_NOTICE
from storefront.money import format_money


@dataclass(frozen=True)
class CartLine:
    """One product row of the rendered cart."""
    product_id: str
    name: str
    quantity: int
    unit_price: int
    line_total: int

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "line_total": self.line_total,
        }


@dataclass(frozen=True)
class CartView:
    """Rendered cart: lines in insertion order plus grand total."""
    lines: List[CartLine] = field(default_factory=list)
    total: int = 0
    currency: str = CURRENCY
    empty_message: str = CART_EMPTY_NOTICE

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_display(self) -> str:
        return format_money(self.total, self.currency)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses / templates."""
        return {
            "is_empty": self.is_empty,
            "lines": [line.to_dict() for line in self.lines],
            "total": self.total,
            "total_display": self.total_display,
            "currency": self.currency,
            "empty_message": self.empty_message if self.is_empty else None,
        }

    def to_text(self) -> str:
        """Plain-text rendering, one line per product then the total."""
        if self.is_empty:
            rows = [self.empty_message]
        else:
            rows = [
                f"{line.name} x{line.quantity}: {format_money(line.line_total, self.currency)}"
                for line in self.lines
            ]
        rows.append(f"Total: {self.total_display}")
        return "\n".join(rows)
