from __future__ import annotations

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field


# A declaration is either a settings table or a list of flags ("!public").
Declaration = Union[Dict[str, Any], List[str]]


class Config(BaseModel):
    version: int | None = None
    description: str | None = None
    post_type: Dict[str, Declaration] = Field(default_factory=dict)
    taxonomy: Dict[str, Declaration] = Field(default_factory=dict)
    meta_box: Dict[str, Declaration] = Field(default_factory=dict)
    field: Dict[str, Declaration] = Field(default_factory=dict)
