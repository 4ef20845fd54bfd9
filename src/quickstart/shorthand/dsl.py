from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Tuple

from .grammar import compile_grammar, group_kinds
from .ir import (
    HANDLED_KEY,
    META_BOX_CONTEXTS,
    META_BOX_PRIORITIES,
    ConfigMap,
    Context,
    GroupKind,
)


logger = logging.getLogger(__name__)


def make_associative(key: Any, value: Any, fill: Any = None) -> Tuple[Any, Any]:
    """Turn a list-style entry (integer key) into a name -> config pair."""

    if isinstance(key, int) and not isinstance(key, bool):
        return value, ({} if fill is None else fill)
    return key, value


def _is_batch(name: Any) -> bool:
    return isinstance(name, (Mapping, list, tuple))


def _is_config(config: Any) -> bool:
    return isinstance(config, (Mapping, list, tuple))


def _split_flag(token: Any) -> Tuple[str, bool]:
    token = str(token)
    return token.lstrip("!"), not token.startswith("!")


def normalize_flags(config: Mapping[Any, Any] | List[Any] | Tuple[Any, ...]) -> ConfigMap:
    """Convert positional entries (e.g. ["!public", "sortable"]) into booleans.

    Returns a new map; keyed entries are copied as-is.
    """

    items = enumerate(config) if isinstance(config, (list, tuple)) else config.items()

    normalized: ConfigMap = {}
    for key, value in items:
        if isinstance(key, int) and not isinstance(key, bool):
            key, value = _split_flag(value)
        normalized[key] = value

    handled = normalized.get(HANDLED_KEY)
    if isinstance(handled, (list, tuple)):
        normalized[HANDLED_KEY] = list(handled)
    return normalized


def _apply_group(config: ConfigMap, group: str, kind: GroupKind, match: str) -> None:
    # Drop the prefix delimiter
    match = match[1:]

    if kind == GroupKind.CLASSES:
        config["class"] = [c for c in match.split(".") if c]

    elif kind == GroupKind.LOCATION:
        for value in match.split("/"):
            if value in META_BOX_CONTEXTS:
                config["context"] = value
            elif value in META_BOX_PRIORITIES:
                config["priority"] = value

    elif kind == GroupKind.FLAGS:
        for token in match.split("."):
            flag, value = _split_flag(token)
            config[flag] = value

    elif kind == GroupKind.TYPE_OPTIONS:
        config["_type_options"] = match.split(".")

    else:
        config[group] = match


def iter_batch(batch: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield name -> config pairs from a mapping or a list-style batch.

    List items that are tables contribute their own entries; items that
    cannot serve as a name are skipped.
    """

    if isinstance(batch, Mapping):
        items = list(batch.items())
    else:
        items = []
        for index, entry in enumerate(batch):
            if isinstance(entry, Mapping):
                items.extend(entry.items())
            else:
                items.append((index, entry))

    for key, value in items:
        name, config = make_associative(key, value)
        if _is_batch(name) or not isinstance(name, Hashable):
            logger.debug("skipping batch entry %r: not a name", name)
            continue
        yield name, config


def _decode_batch(context: Context, batch: Any) -> Dict[Any, Any]:
    entries: Dict[Any, Any] = {}
    for entry_name, entry_config in iter_batch(batch):
        entry_name, entry_config = handle_shorthand(context, entry_name, entry_config)
        entries[entry_name] = entry_config
    return entries


def handle_shorthand(
    context: Context | str,
    name: Any,
    config: Any = None,
) -> Tuple[Any, Any]:
    """Decode shorthand found in `name` and merge it into `config`.

    Returns the canonical name and a new config map. Pass a mapping (or list)
    of name -> config as `name` to decode a batch; the decoded batch is then
    returned in place of the name. Anything that cannot be decoded is handed
    back unchanged.
    """

    context = Context(context)
    if config is None:
        config = {}

    if not isinstance(name, str) and not _is_batch(name):
        return name, config

    if _is_batch(name):
        return _decode_batch(context, name), config

    if not _is_config(config):
        return name, config

    config = normalize_flags(config)

    handled = config.get(HANDLED_KEY)
    if isinstance(handled, list) and context.value in handled:
        logger.debug("shorthand already handled for %s: %r", context.value, name)
        return name, config

    match = compile_grammar(context).fullmatch(name)
    if match is None:
        logger.debug("no %s shorthand in %r", context.value, name)
        return name, config

    name = match.group("name")
    kinds = group_kinds(context)
    for group, value in match.groupdict().items():
        if group == "name" or value is None:
            continue
        _apply_group(config, group, kinds[group], value)

    # Field type shorthand, e.g. "media.gallery"
    if context == Context.FIELD and isinstance(config.get("type"), str) and config["type"]:
        field_type, config = handle_shorthand(Context.FIELD_TYPE, config["type"], config)
        config["type"] = field_type

    if not isinstance(config.get(HANDLED_KEY), list):
        config[HANDLED_KEY] = []
    config[HANDLED_KEY].append(context.value)

    return name, config
