from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


HANDLED_KEY = "__handled_shorthand"

META_BOX_CONTEXTS = ("normal", "advanced", "side")
META_BOX_PRIORITIES = ("high", "core", "default", "low")


class Context(str, Enum):
    """Declaration kind; selects which grammar groups apply."""

    FIELD = "field"
    FIELD_TYPE = "field_type"
    META_BOX = "meta_box"
    POST_TYPE = "post_type"
    TAXONOMY = "taxonomy"


class GroupKind(str, Enum):
    """How a matched group is turned into config entries."""

    CLASSES = "classes"
    LOCATION = "location"
    FLAGS = "flags"
    TYPE_OPTIONS = "type_options"
    VERBATIM = "verbatim"


ConfigMap: TypeAlias = Dict[str, Any]


class GrammarGroup(BaseModel):
    """One named sub-pattern; `pattern` includes the prefix delimiter."""

    model_config = ConfigDict(frozen=True)

    name: str
    pattern: str
    kind: GroupKind = GroupKind.VERBATIM


class ConditionKind(str, Enum):
    NONE = "none"
    DIRECT = "direct"
    NEGATED = "negated"
    UNRESOLVABLE = "unresolvable"


class ConditionRef(BaseModel):
    """A parsed `condition` entry: what to call and what result to expect."""

    kind: ConditionKind
    predicate: Optional[Callable[..., Any]] = None

    @property
    def expected(self) -> bool:
        return self.kind != ConditionKind.NEGATED


class Declarations(BaseModel):
    """Decoded declarations, keyed by canonical name."""

    description: str = ""
    post_types: Dict[str, ConfigMap] = Field(default_factory=dict)
    taxonomies: Dict[str, ConfigMap] = Field(default_factory=dict)
    meta_boxes: Dict[str, ConfigMap] = Field(default_factory=dict)
    fields: Dict[str, ConfigMap] = Field(default_factory=dict)
