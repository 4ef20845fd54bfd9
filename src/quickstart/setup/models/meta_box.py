from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldEntry(BaseModel):
    """A form field; `type_options` come from the field type shorthand."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: Optional[str] = None
    type_options: List[str] = Field(default_factory=list)
    css_class: List[str] = Field(default_factory=list, alias="class")
    settings: Dict[str, Any] = Field(default_factory=dict)


class MetaBox(BaseModel):
    """Meta box registration entry."""

    name: str
    context: Literal["normal", "advanced", "side"] = "advanced"
    priority: Literal["high", "core", "default", "low"] = "default"
    fields: List[FieldEntry] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)
