from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, List

from .ir import Context, GrammarGroup, GroupKind


_NAME = GrammarGroup(name="name", pattern=r"[\w\-]+")
# Field names may be array-style, e.g. meta[key]
_FIELD_NAME = GrammarGroup(name="name", pattern=r"[\w\-\[\]]+")

_PLURAL_AND_FLAGS = [
    GrammarGroup(name="plural", pattern=r"/[\w\-]+"),
    GrammarGroup(name="flag", pattern=r"(?:\.!?[\w\-]+)+", kind=GroupKind.FLAGS),
]

_GROUPS: Dict[Context, List[GrammarGroup]] = {
    # "address:textarea.widefat", "poster:media=gallery"
    Context.FIELD: [
        GrammarGroup(name="type", pattern=r":\w+"),
        GrammarGroup(name="_type_option", pattern=r"=[\w\-/]+"),
        GrammarGroup(name="classes", pattern=r"(?:\.[\w\-]+)+", kind=GroupKind.CLASSES),
    ],
    # "media.gallery"
    Context.FIELD_TYPE: [
        GrammarGroup(name="type_option", pattern=r"(?:\.!?[^.]+)+", kind=GroupKind.TYPE_OPTIONS),
    ],
    # "mymetabox@side/high"
    Context.META_BOX: [
        GrammarGroup(name="location", pattern=r"@[\w/]+?", kind=GroupKind.LOCATION),
    ],
    # "profile/people.hierarchical.!public"
    Context.TAXONOMY: list(_PLURAL_AND_FLAGS),
    # "project@25.5#dashicons-art=title,editor"
    Context.POST_TYPE: [
        *_PLURAL_AND_FLAGS,
        GrammarGroup(name="position", pattern=r"@[\d.]+"),
        GrammarGroup(name="icon", pattern=r"#[\w\-]+"),
        GrammarGroup(name="supports", pattern=r"=[\w\-,]+"),
    ],
}


def build_grammar(context: Context | str) -> List[GrammarGroup]:
    """Return the ordered grammar groups for a context, name first."""

    context = Context(context)
    name = _FIELD_NAME if context == Context.FIELD else _NAME
    return [name, *_GROUPS[context]]


@lru_cache(maxsize=None)
def _compile(context: Context) -> re.Pattern[str]:
    parts: List[str] = []
    for group in build_grammar(context):
        part = f"(?P<{group.name}>{group.pattern})"
        if group.name != "name":
            part += "?"
        parts.append(part)
    return re.compile("".join(parts), re.ASCII)


def compile_grammar(context: Context | str) -> re.Pattern[str]:
    """Compile (once per context) the pattern matched against a whole name."""

    return _compile(Context(context))


def group_kinds(context: Context | str) -> Dict[str, GroupKind]:
    return {group.name: group.kind for group in build_grammar(context)}
