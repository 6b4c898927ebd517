# Preorder/models.py
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator, model_validator

from GREENCROSS.Locations.locations import get_location_by_name
from GREENCROSS.utils.sanitize import SanitizedModel

PICKUP_TIME_SLOTS = ("10:00 AM", "12:00 PM", "3:00 PM", "6:00 PM")

# Blank form, as shown when checkout opens or after a successful submit
DEFAULT_FORM_VALUES: Dict[str, str] = {
    "fullName": "",
    "phoneNumber": "",
    "email": "",
    "pickupLocation": "",
    "pickupDate": "",
    "pickupTime": "",
    "specialInstructions": "",
}


# ---------------------------
# Wire models (POST /api/preorder)
# ---------------------------
class PreorderItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    productId: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, strict=True)
    quantity: int = Field(..., gt=0, strict=True)
    lineTotal: float = Field(..., ge=0, strict=True)


class PreorderCustomer(SanitizedModel):
    model_config = ConfigDict(frozen=True)

    fullName: str = Field(..., min_length=1, max_length=100)
    phoneNumber: str = Field(..., min_length=7, max_length=30)
    email: Optional[EmailStr] = None
    pickupLocation: str = Field(..., min_length=1)
    pickupDate: str = Field(..., min_length=1)
    pickupTime: str = Field(..., min_length=1)
    specialInstructions: Optional[str] = Field(default=None, max_length=1000)

    @model_validator(mode="before")
    @classmethod
    def blank_optionals_to_none(cls, data: Any) -> Any:
        # the form submits "" for untouched optional fields
        if isinstance(data, dict):
            data = dict(data)
            for key in ("email", "specialInstructions"):
                value = data.get(key)
                if isinstance(value, str) and not value.strip():
                    data[key] = None
        return data


class PreorderRequest(BaseModel):
    """Point-in-time copy of the cart plus customer details."""

    model_config = ConfigDict(frozen=True)

    customer: PreorderCustomer
    items: Tuple[PreorderItem, ...]
    total: float = Field(..., strict=True)

    @field_validator("items")
    @classmethod
    def items_not_empty(cls, v):
        if not v:
            raise ValueError("At least one item is required")
        return v


class PreorderResponse(BaseModel):
    ok: bool


# ---------------------------
# Client-side checkout form
# ---------------------------
class PreorderForm(PreorderCustomer):
    """Checkout form values, with the choices the storefront offers."""

    @field_validator("pickupLocation")
    @classmethod
    def known_location(cls, v: str) -> str:
        if get_location_by_name(v) is None:
            raise ValueError("Select a location")
        return v

    @field_validator("pickupTime")
    @classmethod
    def known_slot(cls, v: str) -> str:
        if v not in PICKUP_TIME_SLOTS:
            raise ValueError("Select time")
        return v


def _field_message(error: Dict[str, Any]) -> str:
    if error.get("type") in ("missing", "string_too_short"):
        return "Required"
    msg = error.get("msg", "Invalid value")
    # pydantic prefixes custom ValueErrors
    return msg.removeprefix("Value error, ")


def validate_form(values: Dict[str, Any]) -> Tuple[Optional[PreorderForm], Dict[str, str]]:
    """
    Validate checkout form values.
    Returns (form, {}) when valid, or (None, {field: message}) per failing field.
    """
    try:
        return PreorderForm.model_validate(values), {}
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error.get("loc") else "__all__"
            errors.setdefault(field, _field_message(error))
        return None, errors
