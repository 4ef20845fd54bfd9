from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence

from quickstart.shorthand.condition import ConditionRegistry, test_condition
from quickstart.shorthand.dsl import iter_batch
from quickstart.shorthand.ir import HANDLED_KEY, ConfigMap, Declarations

from .models.manifest import Manifest
from .models.meta_box import FieldEntry, MetaBox
from .models.post_type import PostType, Taxonomy


logger = logging.getLogger(__name__)

# Keys consumed by the backend itself; never copied into `settings`.
_INTERNAL_KEYS = {"condition", HANDLED_KEY}


class SetupBackend:
    """Gate decoded declarations on their conditions and build a Manifest."""

    def __init__(self, registry: ConditionRegistry | None = None) -> None:
        self._registry = registry

    def compile(self, declarations: Declarations, *, test_args: Sequence[Any] = ()) -> Manifest:
        manifest = Manifest(description=declarations.description)

        for name, config in self._active(declarations.post_types, test_args):
            manifest.post_types.append(_lower_post_type(name, config))

        for name, config in self._active(declarations.taxonomies, test_args):
            manifest.taxonomies.append(_lower_taxonomy(name, config))

        for name, config in self._active(declarations.meta_boxes, test_args):
            fields = config.get("fields") or {}
            fields = dict(iter_batch(fields)) if isinstance(fields, (Mapping, list, tuple)) else {}
            meta_box = _lower_meta_box(name, config)
            meta_box.fields = [
                _lower_field(field_name, field_config)
                for field_name, field_config in self._active(fields, test_args)
            ]
            manifest.meta_boxes.append(meta_box)

        for name, config in self._active(declarations.fields, test_args):
            manifest.fields.append(_lower_field(name, config))

        return manifest

    def _active(self, section: Dict[str, ConfigMap], test_args: Sequence[Any]) -> List[tuple[str, ConfigMap]]:
        active: List[tuple[str, ConfigMap]] = []
        for name, config in section.items():
            if not isinstance(config, dict):
                config = {}
            if not test_condition(config, test_args, registry=self._registry):
                logger.debug("skipping %r: condition failed", name)
                continue
            active.append((name, config))
        return active


def _settings(config: ConfigMap, consumed: set[str]) -> Dict[str, Any]:
    skip = _INTERNAL_KEYS | consumed
    return {k: v for k, v in config.items() if k not in skip}


def _split_list(value: Any) -> List[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return [v for v in value.split(",") if v]
    return [str(v) for v in value]


def _menu_position(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("ignoring menu position %r", value)
        return None


def _lower_post_type(name: str, config: ConfigMap) -> PostType:
    return PostType(
        name=name,
        plural=config.get("plural"),
        menu_position=_menu_position(config.get("position")),
        menu_icon=config.get("icon"),
        supports=_split_list(config.get("supports")),
        settings=_settings(config, {"plural", "position", "icon", "supports"}),
    )


def _lower_taxonomy(name: str, config: ConfigMap) -> Taxonomy:
    return Taxonomy(
        name=name,
        plural=config.get("plural"),
        settings=_settings(config, {"plural"}),
    )


def _lower_meta_box(name: str, config: ConfigMap) -> MetaBox:
    location = {k: config[k] for k in ("context", "priority") if k in config}
    return MetaBox(
        name=name,
        **location,
        settings=_settings(config, {"context", "priority", "fields"}),
    )


def _lower_field(name: str, config: ConfigMap) -> FieldEntry:
    css_class = config.get("class") or []
    if isinstance(css_class, str):
        css_class = css_class.split()
    return FieldEntry(
        name=name,
        type=config.get("type"),
        type_options=list(config.get("_type_options") or []),
        css_class=list(css_class),
        settings=_settings(config, {"type", "_type_options", "class"}),
    )
