from __future__ import annotations

from .backend import SetupBackend
from .models.manifest import Manifest
from .models.meta_box import FieldEntry, MetaBox
from .models.post_type import PostType, Taxonomy

__all__ = [
    "FieldEntry",
    "Manifest",
    "MetaBox",
    "PostType",
    "SetupBackend",
    "Taxonomy",
]
