from .customer_type import CustomerType
from .fields import FieldDefinition, FieldMap
from .orders import Order
from .results import (
    CheckoutOutcome,
    CheckoutValidationError,
    InvalidOrMissingSelection,
    ValidationResult,
)

__all__ = [
    "CustomerType",
    # Field definitions
    "FieldDefinition",
    "FieldMap",
    # Orders
    "Order",
    # Results
    "CheckoutOutcome",
    "CheckoutValidationError",
    "InvalidOrMissingSelection",
    "ValidationResult",
]
