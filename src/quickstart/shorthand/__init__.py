from __future__ import annotations

from .condition import ConditionRegistry, parse_condition, test_condition
from .dsl import handle_shorthand, iter_batch, make_associative, normalize_flags
from .frontend import ShorthandFrontend
from .grammar import build_grammar, compile_grammar
from .ir import (
    HANDLED_KEY,
    ConditionKind,
    ConditionRef,
    ConfigMap,
    Context,
    Declarations,
    GrammarGroup,
    GroupKind,
)

__all__ = [
    "HANDLED_KEY",
    "ConditionKind",
    "ConditionRef",
    "ConditionRegistry",
    "ConfigMap",
    "Context",
    "Declarations",
    "GrammarGroup",
    "GroupKind",
    "ShorthandFrontend",
    "build_grammar",
    "compile_grammar",
    "handle_shorthand",
    "iter_batch",
    "make_associative",
    "normalize_flags",
    "parse_condition",
    "test_condition",
]
