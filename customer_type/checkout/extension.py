from __future__ import annotations

import gettext
import html
from typing import Dict, Optional

from ..config import AppConfig, get_config
from ..i18n import get_translations
from ..logging import get_logger
from .interface import FormData, OrderHandle
from .models import (
    CustomerType,
    FieldDefinition,
    FieldMap,
    InvalidOrMissingSelection,
    ValidationResult,
)
from .sanitize import read_form_value

LABEL_CONTEXT = "customer-type"

_SCRIPT_TEMPLATE = """<script type="text/javascript">
	function toggle( type ) {{
		document.querySelector( '#{company_id}' ).style.display = ( 'business' === type ) ? 'revert' : 'none';
		document.querySelector( '#{vat_id}' ).style.display = ( 'business' === type ) ? 'revert' : 'none';
	}}

	document.querySelector( '#{private_id}' ).addEventListener( 'change', function() {{
		toggle( this.checked ? 'private' : '' );
	}} );

	document.querySelector( '#{business_id}' ).addEventListener( 'change', function() {{
		toggle( this.checked ? 'business' : '' );
	}} );
</script>"""


class CheckoutCustomerTypeExtension:
    """Adds a business/private choice to the checkout and records it on the order.

    Every operation takes the data it works on as arguments; the only state
    held here is configuration and the translations used for labels.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        translations: Optional[gettext.NullTranslations] = None,
    ) -> None:
        self.config = config if config is not None else get_config()
        self.translations = translations if translations is not None else get_translations()
        self.logger = get_logger(__name__)

    # ---------- registration ----------

    def setup(self, pipeline) -> None:
        """Register the plugin callbacks on a checkout pipeline."""
        pipeline.add_billing_fields_filter(lambda fields, form_data: self.add_customer_type_field(fields))
        pipeline.add_billing_fields_filter(self.set_company_requirement)
        pipeline.add_after_checkout_form(self.checkout_form_script)
        pipeline.add_checkout_process(self.validate_checkout)
        pipeline.add_create_order(self.annotate_order)
        pipeline.add_admin_order_details(self.render_admin_order_details)
        self.logger.debug("Registered customer type hooks")

    # ---------- field definitions ----------

    def add_customer_type_field(self, fields: FieldMap) -> FieldMap:
        """Return a copy of ``fields`` with the customer type radio added."""
        _ = self.translations.gettext
        augmented = dict(fields)
        augmented[self.config.customer_type_field] = FieldDefinition(
            label=_("Customer type"),
            required=True,
            type="radio",
            class_=["form-row-wide", "pronamic-radio"],
            options={
                CustomerType.BUSINESS.value: _("Business"),
                CustomerType.PRIVATE.value: _("Private"),
            },
            default=self.config.default_customer_type,
            priority=self.config.field_priority,
        )
        return augmented

    def company_required(self, form_data: FormData) -> bool:
        """The company name is required unless the submission says private.

        An absent or unrecognized selection keeps the requirement.
        """
        value = read_form_value(form_data, self.config.customer_type_field)
        return CustomerType.parse(value) is not CustomerType.PRIVATE

    def set_company_requirement(self, fields: FieldMap, form_data: FormData) -> FieldMap:
        company_field = self.config.company_field
        if company_field not in fields:
            return fields

        required = self.company_required(form_data)
        self.logger.debug(f"{company_field} required: {required}")

        updated = dict(fields)
        updated[company_field] = fields[company_field].model_copy(update={"required": required})
        return updated

    def dependent_field_visibility(self, selection: Optional[str]) -> Dict[str, bool]:
        """Which dependent fields the form shows for the selected option."""
        visible = CustomerType.parse(selection) is CustomerType.BUSINESS
        return {
            self.config.company_field: visible,
            self.config.vat_number_field: visible,
        }

    def checkout_form_script(self) -> str:
        """Client-side toggle appended after the checkout form."""
        field = self.config.customer_type_field
        return _SCRIPT_TEMPLATE.format(
            company_id=f"{self.config.company_field}_field",
            vat_id=f"{self.config.vat_number_field}_field",
            private_id=f"{field}_{CustomerType.PRIVATE.value}",
            business_id=f"{field}_{CustomerType.BUSINESS.value}",
        )

    # ---------- checkout ----------

    def validate_checkout(self, form_data: FormData) -> ValidationResult:
        """Gate order creation on a recognized customer type."""
        field = self.config.customer_type_field
        value = read_form_value(form_data, field)
        if CustomerType.parse(value) is not None:
            return ValidationResult.success()

        self.logger.warning(f"Rejecting checkout, unrecognized {field}: {value!r}")
        message = self.translations.gettext(
            "Due to a technical problem, it is unclear whether this concerns a business "
            "or private order, try again or contact us."
        )
        return ValidationResult.failure(
            InvalidOrMissingSelection(field=field, value=value, message=message)
        )

    def annotate_order(self, order: OrderHandle, data: FormData) -> None:
        """Copy the submitted customer type onto the new order's metadata."""
        field = self.config.customer_type_field
        if field not in data:
            return

        customer_type = data[field]
        order.update_meta_data(self.config.customer_type_meta_key, customer_type)
        self.logger.info(f"Stored customer type {customer_type!r} on order")

    # ---------- admin ----------

    def admin_order_label(self, order: OrderHandle) -> str:
        stored = order.get_meta(self.config.customer_type_meta_key)
        customer_type = CustomerType.parse(stored) if isinstance(stored, str) else None
        if customer_type is CustomerType.BUSINESS:
            return self.translations.pgettext(LABEL_CONTEXT, "Business")
        if customer_type is CustomerType.PRIVATE:
            return self.translations.pgettext(LABEL_CONTEXT, "Private")
        return self.translations.gettext("Unknown")

    def render_admin_order_details(self, order: OrderHandle) -> str:
        """HTML row for the order-detail box of the admin view."""
        heading = html.escape(self.translations.gettext("Customer type:"))
        label = html.escape(self.admin_order_label(order))
        return f'<p class="form-field form-field-wide">{heading} {label}</p>'
