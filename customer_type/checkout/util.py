from __future__ import annotations

from typing import Optional

from ..config import AppConfig
from .extension import CheckoutCustomerTypeExtension
from .pipeline import CheckoutPipeline


def get_checkout_pipeline(config: Optional[AppConfig] = None) -> CheckoutPipeline:
    """A checkout pipeline with the customer type extension registered."""
    pipeline = CheckoutPipeline()
    CheckoutCustomerTypeExtension(config=config).setup(pipeline)
    return pipeline
