# Preorder/client.py
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, Field

from GREENCROSS.core.config import get_preorder_endpoint
from GREENCROSS.Cart.cart import CartStore
from GREENCROSS.Preorder.models import (
    DEFAULT_FORM_VALUES,
    PreorderForm,
    PreorderItem,
    PreorderRequest,
    validate_form,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your pre-order has been received. We'll text you when it's ready for pickup."
RETRY_MESSAGE = "Something went wrong. Please try again."


class SubmissionResult(BaseModel):
    ok: bool
    errors: Dict[str, str] = Field(default_factory=dict)
    message: Optional[str] = None


class PreorderSubmission:
    """
    Checkout flow between the cart and the preorder endpoint.

    One request at a time: `can_submit` is False while a request is in flight
    or when the cart has nothing to order. Failures are never retried; the
    cart and form stay as they were so the customer can resubmit.
    """

    def __init__(
        self,
        cart: CartStore,
        endpoint_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.cart = cart
        self.endpoint_url = endpoint_url or get_preorder_endpoint()
        self.http_client = http_client
        self.values: Dict[str, Any] = dict(DEFAULT_FORM_VALUES)
        self.field_errors: Dict[str, str] = {}
        self.submitting = False
        self.success_message: Optional[str] = None
        self.error_message: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        return not self.submitting and not self.cart.is_empty

    @property
    def total(self) -> float:
        return self.cart.subtotal

    def set_field(self, name: str, value: Any) -> None:
        if name not in DEFAULT_FORM_VALUES:
            raise KeyError(f"Unknown form field: {name}")
        self.values[name] = value

    def reset_form(self) -> None:
        self.values = dict(DEFAULT_FORM_VALUES)
        self.field_errors = {}

    def build_request(self, form: PreorderForm) -> PreorderRequest:
        """Copy the cart by value; later cart changes do not touch the request."""
        items = tuple(
            PreorderItem(
                productId=item.product.id,
                name=item.product.name,
                price=item.product.price,
                quantity=item.quantity,
                lineTotal=item.line_total,
            )
            for item in self.cart.detailed_items
        )
        return PreorderRequest(
            customer=form.model_dump(),
            items=items,
            total=sum(item.lineTotal for item in items),
        )

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self.http_client is not None:
            return await self.http_client.post(self.endpoint_url, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(self.endpoint_url, json=payload)

    async def submit(self, values: Optional[Dict[str, Any]] = None) -> SubmissionResult:
        if values is not None:
            self.values.update(values)

        if not self.can_submit:
            return SubmissionResult(ok=False)

        self.success_message = None
        self.error_message = None

        form, errors = validate_form(self.values)
        self.field_errors = errors
        if form is None:
            return SubmissionResult(ok=False, errors=errors)

        req = self.build_request(form)
        payload = req.model_dump(mode="json")

        self.submitting = True
        try:
            response = await self._post(payload)
            response.raise_for_status()
            body = response.json()
            if not isinstance(body, dict) or body.get("ok") is not True:
                raise ValueError(f"Unexpected preorder response: {body!r}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Preorder submission failed: %s", e)
            self.error_message = RETRY_MESSAGE
            return SubmissionResult(ok=False, message=RETRY_MESSAGE)
        finally:
            self.submitting = False

        self.success_message = SUCCESS_MESSAGE
        self.cart.clear()
        self.reset_form()
        self.cart.set_cart_open(False)
        logger.info("Preorder placed: %d items, total %.2f", len(req.items), req.total)
        return SubmissionResult(ok=True, message=SUCCESS_MESSAGE)
