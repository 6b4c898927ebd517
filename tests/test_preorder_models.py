import pytest
from pydantic import ValidationError

from GREENCROSS.Preorder.models import PICKUP_TIME_SLOTS, PreorderCustomer, PreorderRequest, validate_form


def test_valid_form(form_values):
    form, errors = validate_form(form_values)
    assert errors == {}
    assert form.fullName == "John Doe"
    assert form.pickupTime in PICKUP_TIME_SLOTS


def test_blank_optionals_become_none(form_values):
    form_values.update(email="", specialInstructions="  ")
    form, errors = validate_form(form_values)
    assert errors == {}
    assert form.email is None
    assert form.specialInstructions is None


def test_required_fields_report_per_field():
    form, errors = validate_form({
        "fullName": "",
        "phoneNumber": "555",
        "email": "",
        "pickupLocation": "",
        "pickupDate": "",
        "pickupTime": "",
        "specialInstructions": "",
    })
    assert form is None
    assert errors == {
        "fullName": "Required",
        "phoneNumber": "Required",
        "pickupLocation": "Required",
        "pickupDate": "Required",
        "pickupTime": "Required",
    }


def test_malformed_email_rejected(form_values):
    form_values["email"] = "not-an-email"
    form, errors = validate_form(form_values)
    assert form is None
    assert set(errors) == {"email"}


def test_unknown_location_and_slot_rejected(form_values):
    form_values.update(pickupLocation="GreenCross Dallas", pickupTime="9:00 PM")
    form, errors = validate_form(form_values)
    assert errors == {"pickupLocation": "Select a location", "pickupTime": "Select time"}


def test_html_is_stripped_from_customer_text(form_values):
    form_values["specialInstructions"] = "<b>Ring</b> the bell<script></script>"
    customer = PreorderCustomer.model_validate(form_values)
    assert customer.specialInstructions == "Ring the bell"


def test_server_customer_accepts_any_location(form_values):
    form_values["pickupLocation"] = "Somewhere else"
    assert PreorderCustomer.model_validate(form_values).pickupLocation == "Somewhere else"


def test_request_requires_items(preorder_payload):
    preorder_payload["items"] = []
    with pytest.raises(ValidationError):
        PreorderRequest.model_validate(preorder_payload)


def test_request_is_frozen(preorder_payload):
    req = PreorderRequest.model_validate(preorder_payload)
    with pytest.raises(ValidationError):
        req.total = 0
    assert isinstance(req.items, tuple)


def test_ampersands_and_angle_brackets_survive_as_plain_text(form_values):
    form_values.update(fullName="Tom & Jerry", specialInstructions="Ring twice & wait, need < 2 bags")
    customer = PreorderCustomer.model_validate(form_values)
    assert customer.fullName == "Tom & Jerry"
    assert customer.specialInstructions == "Ring twice & wait, need < 2 bags"

    # validating an already clean model again changes nothing
    assert PreorderCustomer.model_validate(customer.model_dump()) == customer
