from __future__ import annotations

from pathlib import Path
from typing import Iterable

from quickstart.setup.backend import SetupBackend
from quickstart.setup.models.meta_box import FieldEntry, MetaBox
from quickstart.shorthand.condition import ConditionRegistry
from quickstart.shorthand.frontend import ShorthandFrontend
from quickstart.shorthand.ir import HANDLED_KEY, Declarations


def _declarations() -> Declarations:
    frontend = ShorthandFrontend()
    config = frontend.load_toml(Path(__file__).with_name("test_declarations.toml"))
    return frontend.parse_config(config)


def _registry(multisite: bool) -> ConditionRegistry:
    registry = ConditionRegistry()
    registry.register("is_multisite", lambda *args: multisite)
    return registry


def _find_meta_box(meta_boxes: Iterable[MetaBox], name: str) -> MetaBox | None:
    return next((m for m in meta_boxes if m.name == name), None)


def _field_names(fields: Iterable[FieldEntry]) -> list[str]:
    return [f.name for f in fields]


def test_backend_post_types() -> None:
    out = SetupBackend(_registry(False)).compile(_declarations())

    project, profile = out.post_types
    assert project.name == "project"
    assert project.menu_position == 25.5
    assert project.menu_icon == "dashicons-art"
    assert project.supports == ["title", "editor"]
    assert project.settings == {}

    assert profile.plural == "people"
    assert profile.settings == {"sortable": True, "public": False}


def test_backend_drops_failed_conditions() -> None:
    out = SetupBackend(_registry(False)).compile(_declarations())

    # genre requires multisite
    assert out.taxonomies == []

    extras = _find_meta_box(out.meta_boxes, "extras")
    assert extras is not None
    assert _field_names(extras.fields) == ["notes"]


def test_backend_negated_condition_drops_meta_box() -> None:
    out = SetupBackend(_registry(True)).compile(_declarations())

    assert [t.name for t in out.taxonomies] == ["genre"]
    assert out.taxonomies[0].settings == {"hierarchical": True}
    assert _find_meta_box(out.meta_boxes, "extras") is None


def test_backend_meta_box_location_and_fields() -> None:
    out = SetupBackend(_registry(False)).compile(_declarations())

    details = _find_meta_box(out.meta_boxes, "details")
    assert details is not None
    assert details.context == "side"
    assert details.priority == "high"
    assert details.settings == {"title": "Details"}

    address, poster = details.fields
    assert address.type == "textarea"
    assert address.css_class == ["widefat"]
    assert address.settings == {}
    assert poster.type == "media"
    assert poster.settings == {"_type_option": "gallery"}


def test_backend_meta_box_defaults() -> None:
    declarations = Declarations(meta_boxes={"plain": {HANDLED_KEY: ["meta_box"]}})
    out = SetupBackend().compile(declarations)

    plain = out.meta_boxes[0]
    assert plain.context == "advanced"
    assert plain.priority == "default"
    assert plain.fields == []
    assert plain.settings == {}


def test_backend_type_options_and_list_fields() -> None:
    declarations = Declarations(
        meta_boxes={"media": {"fields": ["gallery"]}},
        fields={"poster": {"type": "media", "_type_options": ["gallery", "!multiple"]}},
    )
    out = SetupBackend().compile(declarations)

    assert _field_names(out.meta_boxes[0].fields) == ["gallery"]
    assert out.fields[0].type_options == ["gallery", "!multiple"]


def test_backend_passes_test_args() -> None:
    seen: list[tuple] = []

    def for_post(*args):
        seen.append(args)
        return args[0] == "page"

    registry = ConditionRegistry()
    registry.register("for_post", for_post)
    declarations = Declarations(fields={"summary": {"condition": "for_post"}})

    assert SetupBackend(registry).compile(declarations, test_args=("page",)).fields
    assert not SetupBackend(registry).compile(declarations, test_args=("post",)).fields
    assert seen == [("page",), ("post",)]


def test_backend_ignores_bad_menu_position() -> None:
    declarations = Declarations(post_types={"book": {"position": "1.2.3"}})
    out = SetupBackend().compile(declarations)

    assert out.post_types[0].menu_position is None


def test_backend_list_fields_with_tables() -> None:
    declarations = Declarations(
        meta_boxes={
            "box": {"fields": [{"summary": {"type": "textarea"}}, "notes", ["bad"]]},
            "odd": {"fields": "notes"},
        }
    )
    out = SetupBackend().compile(declarations)

    box, odd = out.meta_boxes
    assert _field_names(box.fields) == ["summary", "notes"]
    assert box.fields[0].type == "textarea"
    assert odd.fields == []
