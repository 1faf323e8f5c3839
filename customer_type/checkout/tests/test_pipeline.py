import pytest
from customer_type.checkout import (
    CheckoutCustomerTypeExtension,
    CheckoutPipeline,
    default_billing_fields,
    get_checkout_pipeline,
    sorted_fields,
)
from customer_type.checkout.models import Order, ValidationResult
from customer_type.config import set_config_for_test

BILLING = {
    "billing_first_name": "Remco",
    "billing_last_name": "Tolsma",
    "billing_country": "NL",
    "billing_address_1": "Burgemeester Wuiteweg 39b",
    "billing_postcode": "9203 KA",
    "billing_city": "Drachten",
    "billing_phone": "0512 820 010",
    "billing_email": "info@example.com",
}

@pytest.fixture(autouse=True)
def default_config():
    set_config_for_test()
    yield

@pytest.fixture
def pipeline():
    return get_checkout_pipeline()

def test_business_checkout_without_company(pipeline):
    """Validation passes, the company name is required and the order says business."""
    form_data = {**BILLING, "pronamic_customer_type": "business"}

    fields = pipeline.billing_fields(form_data)
    assert fields["billing_company"].required is True

    outcome = pipeline.process_checkout(form_data, order_id="1001")
    assert outcome.ok
    assert outcome.errors == []
    assert outcome.order.order_id == "1001"
    assert outcome.order.get_meta("_pronamic_customer_type") == "business"

def test_private_checkout(pipeline):
    """The company name is optional and the admin view shows Private."""
    form_data = {**BILLING, "pronamic_customer_type": "private"}

    assert pipeline.billing_fields(form_data)["billing_company"].required is False

    outcome = pipeline.process_checkout(form_data)
    assert outcome.ok
    assert outcome.order.get_meta("_pronamic_customer_type") == "private"
    assert pipeline.render_admin_order_details(outcome.order) == (
        '<p class="form-field form-field-wide">Customer type: Private</p>'
    )

@pytest.mark.parametrize("value", [None, "", "zakelijk"])
def test_rejected_checkout_creates_no_order(pipeline, value):
    created = []
    pipeline.add_create_order(lambda order, data: created.append(order))
    form_data = dict(BILLING)
    if value is not None:
        form_data["pronamic_customer_type"] = value

    outcome = pipeline.process_checkout(form_data)

    assert not outcome.ok
    assert outcome.order is None
    assert created == []
    assert len(outcome.errors) == 1
    assert outcome.errors[0].field == "pronamic_customer_type"

def test_failed_validator_without_error_still_halts():
    pipeline = CheckoutPipeline()
    pipeline.add_checkout_process(lambda form_data: ValidationResult(ok=False))
    outcome = pipeline.process_checkout(BILLING)
    assert not outcome.ok
    assert outcome.order is None
    assert outcome.errors == []

def test_customer_type_field_is_first(pipeline):
    keys = [key for key, _ in sorted_fields(pipeline.billing_fields({}))]
    assert keys[0] == "pronamic_customer_type"
    assert keys[1:] == [key for key, _ in sorted_fields(default_billing_fields())]

def test_posted_data_only_carries_known_fields(pipeline):
    form_data = {**BILLING, "pronamic_customer_type": " private ", "billing_city": "<b>Drachten</b>", "nonce": "abc"}
    fields = pipeline.billing_fields(form_data)
    data = pipeline.posted_data(fields, form_data)
    assert "nonce" not in data
    assert data["pronamic_customer_type"] == "private"
    assert data["billing_city"] == "Drachten"

def test_order_billing_holds_processed_values(pipeline):
    outcome = pipeline.process_checkout({**BILLING, "pronamic_customer_type": "business"})
    assert outcome.order.billing == BILLING
    assert "pronamic_customer_type" not in outcome.order.billing

def test_billing_fields_with_custom_base(pipeline):
    """A host with its own field set gets the customer type but no company rule."""
    base = {"billing_email": default_billing_fields()["billing_email"]}
    fields = pipeline.billing_fields({"pronamic_customer_type": "private"}, base_fields=base)
    assert set(fields) == {"billing_email", "pronamic_customer_type"}
    assert set(base) == {"billing_email"}

def test_filters_run_in_registration_order():
    calls = []
    pipeline = CheckoutPipeline()
    pipeline.add_billing_fields_filter(lambda fields, form_data: calls.append("first") or fields)
    pipeline.add_billing_fields_filter(lambda fields, form_data: calls.append("second") or fields)
    pipeline.billing_fields({})
    assert calls == ["first", "second"]

def test_callback_errors_propagate():
    pipeline = CheckoutPipeline()

    def broken(order, data):
        raise RuntimeError("order store unavailable")

    pipeline.add_create_order(broken)
    with pytest.raises(RuntimeError):
        pipeline.process_checkout(BILLING)

def test_render_after_checkout_form(pipeline):
    html = pipeline.render_after_checkout_form()
    assert html == CheckoutCustomerTypeExtension().checkout_form_script()

def test_admin_details_for_order_created_elsewhere(pipeline):
    """Orders that bypassed the checkout show Unknown."""
    assert "Customer type: Unknown" in pipeline.render_admin_order_details(Order(order_id="2001"))

def test_pipeline_without_plugins():
    pipeline = CheckoutPipeline()
    outcome = pipeline.process_checkout(BILLING, order_id="3001")
    assert outcome.ok
    assert outcome.order.meta_data == {}
    assert pipeline.render_after_checkout_form() == ""
    assert pipeline.render_admin_order_details(outcome.order) == ""
