from .extension import CheckoutCustomerTypeExtension
from .pipeline import CheckoutPipeline, default_billing_fields, sorted_fields
from .util import get_checkout_pipeline

__all__ = [
    "CheckoutCustomerTypeExtension",
    "CheckoutPipeline",
    "default_billing_fields",
    "sorted_fields",
    "get_checkout_pipeline",
]
