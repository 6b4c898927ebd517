# Cart/cart.py
import json
import logging
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from GREENCROSS.Catalog.models import Product
from GREENCROSS.Catalog.products import get_product_by_id
from GREENCROSS.Cart.storage import CART_STORAGE_KEY, MemoryStorage

logger = logging.getLogger(__name__)


class CartLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)


class DetailedItem(BaseModel):
    """A cart line resolved against the catalog."""

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int
    line_total: float


class CartStore:
    """
    Client-side cart: one line per product id, kept in insertion order.

    - Totals are derived from the catalog on every read.
    - Every mutation is written to local storage; the initial state is read
      once on construction. Storage failures never reach the caller.
    - The panel flags are plain booleans; checkout gating belongs to the
      preorder submission component.
    """

    def __init__(
        self,
        storage=None,
        catalog_lookup: Callable[[str], Optional[Product]] = get_product_by_id,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.catalog_lookup = catalog_lookup
        self._lines: Dict[str, int] = self._load()
        self.is_cart_open = False
        self.is_checkout_open = False

    # -------- persistence --------

    def _load(self) -> Dict[str, int]:
        try:
            raw = self.storage.get_item(CART_STORAGE_KEY)
            if not raw:
                return {}
            data = json.loads(raw)
        except Exception:
            logger.debug("Cart storage unreadable, starting empty", exc_info=True)
            return {}

        if not isinstance(data, list):
            logger.debug("Ignoring stored cart of type %s", type(data).__name__)
            return {}

        lines: Dict[str, int] = {}
        for entry in data:
            if not isinstance(entry, dict):
                continue
            product_id = entry.get("productId")
            quantity = entry.get("quantity")
            if not isinstance(product_id, str) or not product_id:
                continue
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                logger.debug("Dropping stored line %s with quantity %r", product_id, quantity)
                continue
            # duplicates from hand-edited storage are merged
            lines[product_id] = lines.get(product_id, 0) + quantity
        return lines

    def _save(self) -> None:
        payload = json.dumps(
            [{"productId": product_id, "quantity": quantity} for product_id, quantity in self._lines.items()]
        )
        try:
            self.storage.set_item(CART_STORAGE_KEY, payload)
        except Exception:
            logger.debug("Cart storage write failed, cart is session-only", exc_info=True)

    # -------- mutations --------

    def add_item(self, product_id: str) -> None:
        self._lines[product_id] = self._lines.get(product_id, 0) + 1
        self._save()
        self.set_cart_open(True)

    def remove_item(self, product_id: str) -> None:
        if self._lines.pop(product_id, None) is not None:
            self._save()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(product_id)
            return
        if product_id not in self._lines:
            return
        self._lines[product_id] = quantity
        self._save()

    def clear(self) -> None:
        self._lines = {}
        self._save()

    # -------- derived state --------

    @property
    def items(self) -> List[CartLine]:
        return [CartLine(product_id=product_id, quantity=quantity) for product_id, quantity in self._lines.items()]

    @property
    def detailed_items(self) -> List[DetailedItem]:
        detailed = []
        for product_id, quantity in self._lines.items():
            product = self.catalog_lookup(product_id)
            if product is None:
                continue
            detailed.append(DetailedItem(product=product, quantity=quantity, line_total=product.price * quantity))
        return detailed

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self.detailed_items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.detailed_items)

    @property
    def is_empty(self) -> bool:
        return not self.detailed_items

    # -------- UI flags --------

    def set_cart_open(self, open: bool) -> None:
        self.is_cart_open = open

    def set_checkout_open(self, open: bool) -> None:
        self.is_checkout_open = open
