import streamlit as st

# Configuration
from customer_type.config import get_config

# Checkout pipeline with the customer type extension registered
from customer_type.checkout import CheckoutCustomerTypeExtension, CheckoutPipeline, sorted_fields

st.set_page_config(page_title="Checkout: customer type", layout="wide")

# -----------------------------------------------------------------------------
# Host wiring: one pipeline, plugin callbacks registered once per script run
# -----------------------------------------------------------------------------
config = get_config()
extension = CheckoutCustomerTypeExtension(config=config)
pipeline = CheckoutPipeline()
extension.setup(pipeline)

if "orders" not in st.session_state:
    st.session_state["orders"] = []

# -----------------------------------------------------------------------------
# Checkout form
# -----------------------------------------------------------------------------
st.markdown("### Billing details")

# The radio drives which fields show, so it is read before the rest of the form
fields = pipeline.billing_fields({})
type_field = fields[config.customer_type_field]
option_values = list(type_field.options)
selection = st.radio(
    type_field.label,
    option_values,
    index=option_values.index(type_field.default),
    format_func=lambda value: type_field.options[value],
    horizontal=True,
)
form_data = {config.customer_type_field: selection}

# Field requirements depend on the current selection
fields = pipeline.billing_fields(form_data)
visibility = extension.dependent_field_visibility(selection)

for key, field in sorted_fields(fields):
    if key == config.customer_type_field or not visibility.get(key, True):
        continue
    label = f"{field.label} *" if field.required else field.label
    form_data[key] = st.text_input(label, key=key)

if visibility[config.vat_number_field]:
    form_data[config.vat_number_field] = st.text_input("VAT number", key=config.vat_number_field)

if st.button("Place order"):
    outcome = pipeline.process_checkout(form_data)
    if outcome.ok:
        st.session_state["orders"].append(outcome.order)
        st.success(f"Order {outcome.order.order_id} placed")
    else:
        for error in outcome.errors:
            st.error(error.message)

# -----------------------------------------------------------------------------
# Admin order view
# -----------------------------------------------------------------------------
st.markdown("### Orders (admin)")
for order in reversed(st.session_state["orders"]):
    with st.expander(f"Order {order.order_id}"):
        st.markdown(pipeline.render_admin_order_details(order), unsafe_allow_html=True)
        st.json(order.billing)
