from __future__ import annotations

import json
from pathlib import Path

from quickstart.setup.compiler import compile_toml_config, main
from quickstart.shorthand.condition import ConditionRegistry


def _fixture() -> Path:
    return Path(__file__).with_name("test_declarations.toml")


def test_compile_toml_config(tmp_path: Path) -> None:
    registry = ConditionRegistry()
    registry.register("is_multisite", lambda: False)
    out = tmp_path / "manifest.json"

    compile_toml_config(_fixture(), out, registry=registry)
    manifest = json.loads(out.read_text(encoding="utf-8"))

    assert manifest["description"] == "Portfolio theme"
    assert [p["name"] for p in manifest["post_types"]] == ["project", "profile"]
    assert manifest["post_types"][0]["supports"] == ["title", "editor"]
    assert manifest["taxonomies"] == []

    details = manifest["meta_boxes"][0]
    assert details["name"] == "details"
    assert details["fields"][0]["class"] == ["widefat"]

    # exclude_none drops unset optionals
    assert "plural" not in manifest["post_types"][0]


def test_compile_without_registry_fails_open(tmp_path: Path) -> None:
    out = tmp_path / "manifest.json"

    compile_toml_config(_fixture(), out)
    manifest = json.loads(out.read_text(encoding="utf-8"))

    assert [t["name"] for t in manifest["taxonomies"]] == ["genre"]
    assert [m["name"] for m in manifest["meta_boxes"]] == ["details", "extras"]
    extras = manifest["meta_boxes"][1]
    assert [f["name"] for f in extras["fields"]] == ["notes", "website"]


def test_main(tmp_path: Path) -> None:
    out = tmp_path / "manifest.json"

    assert main([str(_fixture()), str(out), "--indent", "4"]) == 0
    assert json.loads(out.read_text(encoding="utf-8"))["fields"][0]["name"] == "meta[subtitle]"
