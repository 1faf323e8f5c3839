from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol

from .models import FieldMap, ValidationResult


# ---- Types exchanged with the host checkout ----

FormData = Mapping[str, Any]


# ---- Order handle protocol ----

class OrderHandle(Protocol):
    """
    The slice of a host order object this plugin touches.

    The host owns the order and its lifetime; the plugin only writes one
    metadata key at creation time and reads it back in the admin view.
    """

    def update_meta_data(self, key: str, value: Any) -> None:
        """Attach or replace a metadata value on the order."""
        ...

    def get_meta(self, key: str, default: Optional[Any] = None) -> Any:
        """Read a metadata value, returning ``default`` when absent."""
        ...


# ---- Hook callback signatures ----

# Billing-field filters receive the raw form data explicitly.
FieldsFilter = Callable[[FieldMap, FormData], FieldMap]

# Checkout-process validators gate order creation.
CheckoutValidator = Callable[[FormData], ValidationResult]

# Create-order callbacks receive the new order and the processed submission.
CreateOrderCallback = Callable[[OrderHandle, Mapping[str, str]], None]

# Admin-view and after-form renderers return HTML fragments.
AdminOrderRenderer = Callable[[OrderHandle], str]
FormRenderer = Callable[[], str]
