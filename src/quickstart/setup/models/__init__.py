from __future__ import annotations

from .manifest import Manifest
from .meta_box import FieldEntry, MetaBox
from .post_type import PostType, Taxonomy

__all__ = [
    "FieldEntry",
    "Manifest",
    "MetaBox",
    "PostType",
    "Taxonomy",
]
