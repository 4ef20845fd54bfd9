from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class PostType(BaseModel):
    """Post type registration entry."""

    name: str
    plural: Optional[str] = None
    menu_position: Optional[float] = None
    menu_icon: Optional[str] = None
    supports: Optional[List[str]] = None
    settings: Dict[str, Any] = Field(default_factory=dict)


class Taxonomy(BaseModel):
    """Taxonomy registration entry."""

    name: str
    plural: Optional[str] = None
    settings: Dict[str, Any] = Field(default_factory=dict)
