from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .orders import Order


class CheckoutValidationError(ValueError):
    """Raised by hosts that turn a failed validation into an exception."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidOrMissingSelection(BaseModel):
    """The submitted customer type was absent or not a recognized value."""
    field: str = Field(description="Form field the value was read from")
    value: Optional[str] = Field(default=None, description="Sanitized submitted value, None when absent")
    message: str = Field(description="Localized message shown to the customer")


class ValidationResult(BaseModel):
    """Outcome of the checkout-time gate."""
    ok: bool
    error: Optional[InvalidOrMissingSelection] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: InvalidOrMissingSelection) -> "ValidationResult":
        return cls(ok=False, error=error)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise CheckoutValidationError(self.error.message, field=self.error.field)


class CheckoutOutcome(BaseModel):
    """Result of driving one checkout request through the pipeline."""
    ok: bool
    order: Optional[Order] = None
    errors: List[InvalidOrMissingSelection] = Field(default_factory=list)
