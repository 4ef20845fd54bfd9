from __future__ import annotations

from pathlib import Path
import argparse
import logging

from quickstart.shorthand.condition import ConditionRegistry
from quickstart.shorthand.frontend import ShorthandFrontend

from .backend import SetupBackend


logger = logging.getLogger(__name__)


def compile_toml_config(
    in_path: str | Path,
    out_path: str | Path,
    *,
    indent: int | None = 2,
    registry: ConditionRegistry | None = None,
) -> None:
    """End-to-end compilation: TOML declarations file -> manifest JSON file."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = ShorthandFrontend()
    config = frontend.load_toml(in_path)
    declarations = frontend.parse_config(config)

    backend = SetupBackend(registry)
    manifest = backend.compile(declarations)

    json_str = manifest.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
    out_path.write_text(json_str + "\n", encoding="utf-8")
    logger.info("wrote manifest for %s to %s", in_path, out_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode shorthand declarations (toml) into a registration manifest json."
    )
    parser.add_argument("config", help="Declarations toml path (e.g. theme.toml)")
    parser.add_argument("out", help="Output manifest json path")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoding details")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    compile_toml_config(args.config, args.out, indent=args.indent)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
