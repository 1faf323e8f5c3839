from __future__ import annotations

import uuid
from typing import List, Optional, Tuple

from ..logging import get_logger
from .interface import (
    AdminOrderRenderer,
    CheckoutValidator,
    CreateOrderCallback,
    FieldsFilter,
    FormData,
    FormRenderer,
    OrderHandle,
)
from .models import CheckoutOutcome, FieldDefinition, FieldMap, Order
from .sanitize import read_form_value


def default_billing_fields() -> FieldMap:
    """Billing fields of a stock checkout, before any filter runs."""
    return {
        "billing_first_name": FieldDefinition(label="First name", required=True, priority=10),
        "billing_last_name": FieldDefinition(label="Last name", required=True, priority=20),
        "billing_company": FieldDefinition(label="Company name", required=False, priority=30),
        "billing_country": FieldDefinition(label="Country / Region", required=True, type="country", priority=40),
        "billing_address_1": FieldDefinition(label="Street address", required=True, priority=50),
        "billing_address_2": FieldDefinition(label="Apartment, suite, unit, etc.", required=False, priority=60),
        "billing_postcode": FieldDefinition(label="Postcode / ZIP", required=True, priority=65),
        "billing_city": FieldDefinition(label="Town / City", required=True, priority=70),
        "billing_phone": FieldDefinition(label="Phone", required=True, type="tel", priority=100),
        "billing_email": FieldDefinition(label="Email address", required=True, type="email", priority=110),
    }


def sorted_fields(fields: FieldMap) -> List[Tuple[str, FieldDefinition]]:
    """Fields in display order; ties keep their mapping order."""
    return sorted(fields.items(), key=lambda item: item[1].priority)


class CheckoutPipeline:
    """
    Minimal host checkout driving the lifecycle hooks plugins register on.

    - Billing-field filters run in registration order and receive the raw
      form data as an argument.
    - Every checkout-process validator runs; any failure halts the request
      before an order exists.
    - Create-order callbacks see the new order and the processed submission.

    Exceptions raised by callbacks propagate to the caller.
    """

    def __init__(self) -> None:
        self.logger = get_logger(__name__)
        self._fields_filters: List[FieldsFilter] = []
        self._validators: List[CheckoutValidator] = []
        self._create_order: List[CreateOrderCallback] = []
        self._admin_order_details: List[AdminOrderRenderer] = []
        self._after_checkout_form: List[FormRenderer] = []

    # ---------- registration ----------

    def add_billing_fields_filter(self, callback: FieldsFilter) -> None:
        self._fields_filters.append(callback)

    def add_checkout_process(self, callback: CheckoutValidator) -> None:
        self._validators.append(callback)

    def add_create_order(self, callback: CreateOrderCallback) -> None:
        self._create_order.append(callback)

    def add_admin_order_details(self, callback: AdminOrderRenderer) -> None:
        self._admin_order_details.append(callback)

    def add_after_checkout_form(self, callback: FormRenderer) -> None:
        self._after_checkout_form.append(callback)

    # ---------- hooks ----------

    def billing_fields(self, form_data: FormData, base_fields: Optional[FieldMap] = None) -> FieldMap:
        fields = dict(base_fields) if base_fields is not None else default_billing_fields()
        for callback in self._fields_filters:
            fields = callback(fields, form_data)
        return fields

    @staticmethod
    def posted_data(fields: FieldMap, form_data: FormData) -> dict:
        """Sanitized values of the known fields present in the submission."""
        data = {}
        for key in fields:
            value = read_form_value(form_data, key)
            if value is not None:
                data[key] = value
        return data

    def process_checkout(
        self,
        form_data: FormData,
        order_id: Optional[str] = None,
        base_fields: Optional[FieldMap] = None,
    ) -> CheckoutOutcome:
        """Validate a submission and, when it passes, create the order."""
        fields = self.billing_fields(form_data, base_fields)

        failed = [result for result in (validator(form_data) for validator in self._validators) if not result.ok]
        if failed:
            errors = [result.error for result in failed if result.error is not None]
            self.logger.warning(f"Checkout halted by {len(failed)} validator(s)")
            return CheckoutOutcome(ok=False, errors=errors)

        data = self.posted_data(fields, form_data)
        order = Order(
            order_id=order_id or uuid.uuid4().hex,
            billing={key: value for key, value in data.items() if key.startswith("billing_")},
        )
        for callback in self._create_order:
            callback(order, data)

        self.logger.info(f"Created order {order.order_id}")
        return CheckoutOutcome(ok=True, order=order)

    def render_after_checkout_form(self) -> str:
        return "\n".join(callback() for callback in self._after_checkout_form)

    def render_admin_order_details(self, order: OrderHandle) -> str:
        return "\n".join(callback(order) for callback in self._admin_order_details)
