"""Cart store: product quantities kept in sync with a key/value slot."""
import json
from typing import Callable, Dict, Optional, TypeVar

from storefront.catalog import Catalog
from storefront.config import CART_STORAGE_KEY, CURRENCY
from storefront.errors import EmptyCartError, MalformedPersistedStateError
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.money import line_total, sum_minor
from storefront.storage import KeyValueStorage
from .models import CartLine, CartView

logger = get_logger(__name__)

T = TypeVar("T")

DisplayCallback = Callable[[CartView], None]
CheckoutHandler = Callable[[CartView], T]


def decode_cart_state(raw: str, key: str = CART_STORAGE_KEY) -> Dict[str, int]:
    """
    Parse a persisted cart mapping.

    Raises:
        MalformedPersistedStateError: not JSON, not an object, or any
            quantity that is not a positive integer.
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        raise MalformedPersistedStateError(key, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedPersistedStateError(key, f"expected object, got {type(data).__name__}")

    state: Dict[str, int] = {}
    for product_id, quantity in data.items():
        # bool is an int subclass; JSON true is not a quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise MalformedPersistedStateError(key, f"non-integer quantity for {product_id!r}")
        if quantity < 1:
            raise MalformedPersistedStateError(key, f"non-positive quantity for {product_id!r}")
        state[product_id] = quantity
    return state


def encode_cart_state(state: Dict[str, int]) -> str:
    return json.dumps(state)


class CartStore:
    """
    Owns the cart state: product id -> quantity (always >= 1).

    Every state change is written back to storage and pushed to the display
    callback. Unknown product ids are ignored, malformed storage resets to an
    empty cart, so no operation raises for ordinary input. The only raising
    operation is checkout() on an empty cart.

    Construct one per page/session and pass it to whatever needs it.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        catalog: Catalog,
        display: Optional[DisplayCallback] = None,
        storage_key: str = CART_STORAGE_KEY,
        currency: str = CURRENCY,
    ):
        self.storage = storage
        self.catalog = catalog
        self.display = display
        self.storage_key = storage_key
        self.currency = currency
        self._state: Dict[str, int] = {}

    # ==================== PERSISTENCE ====================

    def load(self) -> Dict[str, int]:
        """Hydrate from storage; absent or malformed data gives an empty cart."""
        try:
            raw = self.storage.get(self.storage_key)
        except Exception as e:
            logger.error(f"Failed to read cart, starting empty: {e}")
            raw = None

        if raw is None:
            self._state = {}
        else:
            try:
                state = decode_cart_state(raw, self.storage_key)
            except MalformedPersistedStateError as e:
                logger.warning(f"Resetting cart: {e.reason}")
                state = {}

            unknown = [pid for pid in state if pid not in self.catalog]
            for product_id in unknown:
                logger.info(f"Dropping unknown product {sanitize_id_for_logging(product_id)} from stored cart")
                del state[product_id]
            self._state = state

        self._notify()
        return self.items()

    def _save(self) -> None:
        try:
            self.storage.set(self.storage_key, encode_cart_state(self._state))
        except Exception as e:
            # In-memory state stays authoritative; next mutation retries the write
            logger.error(f"Failed to persist cart: {e}")

    def _commit(self) -> None:
        self._save()
        self._notify()

    def _notify(self) -> None:
        if self.display is not None:
            self.display(self.render())

    # ==================== COMMANDS ====================

    def add(self, product_id: str) -> None:
        """Add one unit of a catalog product."""
        if product_id not in self.catalog:
            logger.debug(f"Ignoring add of unknown product {sanitize_id_for_logging(product_id)}")
            return
        self._state[product_id] = self._state.get(product_id, 0) + 1
        self._commit()

    def increment(self, product_id: str) -> None:
        if product_id not in self._state:
            return
        self._state[product_id] += 1
        self._commit()

    def decrement(self, product_id: str) -> None:
        """Remove one unit; the entry disappears when it reaches zero."""
        quantity = self._state.get(product_id)
        if quantity is None:
            return
        if quantity <= 1:
            del self._state[product_id]
        else:
            self._state[product_id] = quantity - 1
        self._commit()

    def clear(self) -> None:
        self._state = {}
        self._commit()

    def checkout(self, handler: CheckoutHandler[T]) -> T:
        """
        Hand the rendered cart to the checkout collaborator.

        Raises:
            EmptyCartError: the cart has no items; handler is not called.
        """
        if not self._state:
            raise EmptyCartError()
        view = self.render()
        logger.info(f"Checkout started: {self.item_count()} items, total {view.total_display}")
        return handler(view)

    # ==================== QUERIES ====================

    def items(self) -> Dict[str, int]:
        """Copy of the current state."""
        return dict(self._state)

    def quantity(self, product_id: str) -> int:
        return self._state.get(product_id, 0)

    def item_count(self) -> int:
        return sum(self._state.values())

    def is_empty(self) -> bool:
        return not self._state

    def total(self) -> int:
        """Grand total in minor units."""
        return sum_minor(line.line_total for line in self._lines())

    def render(self) -> CartView:
        """Pure projection of the current state."""
        lines = self._lines()
        return CartView(
            lines=lines,
            total=sum_minor(line.line_total for line in lines),
            currency=self.currency,
        )

    def _lines(self) -> list[CartLine]:
        lines = []
        for product_id, quantity in self._state.items():
            product = self.catalog.get(product_id)
            if product is None:
                continue
            lines.append(
                CartLine(
                    product_id=product_id,
                    name=product.name,
                    quantity=quantity,
                    unit_price=product.price_minor_units,
                    line_total=line_total(product.price_minor_units, quantity),
                )
            )
        return lines
