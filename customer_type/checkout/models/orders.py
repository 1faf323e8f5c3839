from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Order(BaseModel):
    """In-memory order record used by the reference checkout pipeline."""
    order_id: str = Field(description="Unique order identifier")
    billing: Dict[str, str] = Field(default_factory=dict, description="Processed billing field values")
    meta_data: Dict[str, Any] = Field(default_factory=dict, description="Arbitrary key/value order metadata")

    def update_meta_data(self, key: str, value: Any) -> None:
        self.meta_data[key] = value

    def get_meta(self, key: str, default: Optional[Any] = None) -> Any:
        return self.meta_data.get(key, default)
