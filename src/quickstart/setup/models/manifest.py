from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .meta_box import FieldEntry, MetaBox
from .post_type import PostType, Taxonomy


class Manifest(BaseModel):
    """Everything that passed its condition, ready for registration."""

    description: str = ""
    post_types: List[PostType] = Field(default_factory=list)
    taxonomies: List[Taxonomy] = Field(default_factory=list)
    meta_boxes: List[MetaBox] = Field(default_factory=list)
    fields: List[FieldEntry] = Field(default_factory=list)
