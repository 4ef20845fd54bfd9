from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Sequence

from .ir import ConditionKind, ConditionRef


logger = logging.getLogger(__name__)

Predicate = Callable[..., Any]


class ConditionRegistry:
    """Named condition predicates, looked up before import paths.

    Usage:
        registry = ConditionRegistry()

        @registry.register("is_admin")
        def is_admin(*args):
            ...
    """

    def __init__(self, predicates: Mapping[str, Predicate] | None = None) -> None:
        self._predicates: Dict[str, Predicate] = dict(predicates or {})

    def register(
        self, name: str, func: Predicate | None = None
    ) -> Predicate | Callable[[Predicate], Predicate]:
        if func is not None:
            self._predicates[name] = func
            return func

        def decorator(fn: Predicate) -> Predicate:
            self._predicates[name] = fn
            return fn

        return decorator

    def get(self, name: str) -> Optional[Predicate]:
        return self._predicates.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)


def _import_path(path: str) -> Any:
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    elif "." in path:
        module_name, _, attr_path = path.rpartition(".")
    else:
        return None

    # Relative imports have no anchor package here
    if not module_name or not attr_path or module_name.startswith("."):
        return None

    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr)
    except (ImportError, AttributeError, TypeError, ValueError) as exc:
        logger.debug("cannot import condition %r: %s", path, exc)
        return None
    return target


def _resolve(reference: Any, registry: ConditionRegistry | None) -> Optional[Predicate]:
    if callable(reference):
        return reference
    if not isinstance(reference, str) or not reference:
        return None

    if registry is not None and reference in registry:
        return registry.get(reference)

    target = _import_path(reference)
    return target if callable(target) else None


def parse_condition(value: Any, registry: ConditionRegistry | None = None) -> ConditionRef:
    """Resolve a `condition` entry; a leading "!" on a string negates it."""

    if value is None:
        return ConditionRef(kind=ConditionKind.NONE)

    kind = ConditionKind.DIRECT
    if isinstance(value, str) and value.startswith("!"):
        kind = ConditionKind.NEGATED
        value = value[1:]

    predicate = _resolve(value, registry)
    if predicate is None:
        logger.debug("condition %r is not callable, ignoring it", value)
        return ConditionRef(kind=ConditionKind.UNRESOLVABLE)

    return ConditionRef(kind=kind, predicate=predicate)


def test_condition(
    config: Any,
    test_args: Sequence[Any] = (),
    *,
    registry: ConditionRegistry | None = None,
) -> bool:
    """Check the `condition` setting of a declaration, if any.

    Returns True when there is no condition, when it cannot be resolved to
    a callable, or when the predicate's result (called with `test_args`)
    has the expected truthiness. A "!name" condition expects a falsy result.
    """

    if not isinstance(config, Mapping) or "condition" not in config:
        return True

    ref = parse_condition(config["condition"], registry)
    if ref.predicate is None:
        return True

    result = ref.predicate(*test_args)
    return bool(result) == ref.expected
