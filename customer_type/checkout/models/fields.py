from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldDefinition(BaseModel):
    """One entry of a checkout field-definition mapping."""
    model_config = ConfigDict(populate_by_name=True)

    label: str = Field(default="", description="Label shown next to the input")
    required: bool = Field(default=False, description="Whether the host rejects an empty value")
    type: str = Field(default="text", description="Input kind (text, radio, select, ...)")
    class_: List[str] = Field(default_factory=list, alias="class", description="CSS classes of the form row")
    options: Dict[str, str] = Field(default_factory=dict, description="Option value to label, for choice inputs")
    default: Optional[str] = Field(default=None, description="Initially selected value")
    priority: int = Field(default=10, description="Display order within the field group")


FieldMap = Dict[str, FieldDefinition]
