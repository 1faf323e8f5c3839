from __future__ import annotations

from enum import Enum
from typing import Optional


class CustomerType(str, Enum):
    """Whether a checkout concerns a business or a private purchase."""
    BUSINESS = "business"
    PRIVATE = "private"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["CustomerType"]:
        """Exact match on the stored literal; no case folding."""
        for member in cls:
            if member.value == value:
                return member
        return None
