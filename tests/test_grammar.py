from __future__ import annotations

import pytest

from quickstart.shorthand.grammar import build_grammar, compile_grammar
from quickstart.shorthand.ir import Context, GroupKind


def _names(context: str) -> list[str]:
    return [group.name for group in build_grammar(context)]


def test_group_order_per_context() -> None:
    assert _names("field") == ["name", "type", "_type_option", "classes"]
    assert _names("field_type") == ["name", "type_option"]
    assert _names("meta_box") == ["name", "location"]
    assert _names("taxonomy") == ["name", "plural", "flag"]
    assert _names("post_type") == ["name", "plural", "flag", "position", "icon", "supports"]


def test_group_kinds() -> None:
    kinds = {g.name: g.kind for g in build_grammar(Context.POST_TYPE)}

    assert kinds["flag"] == GroupKind.FLAGS
    assert kinds["position"] == GroupKind.VERBATIM


def test_compiled_pattern_is_cached() -> None:
    assert compile_grammar("meta_box") is compile_grammar(Context.META_BOX)


def test_pattern_is_anchored_and_ascii() -> None:
    pattern = compile_grammar("post_type")

    assert pattern.fullmatch("project@25") is not None
    assert pattern.fullmatch("project@25 ") is None
    assert pattern.fullmatch("projét") is None


def test_unknown_context() -> None:
    with pytest.raises(ValueError):
        build_grammar("sidebar")
