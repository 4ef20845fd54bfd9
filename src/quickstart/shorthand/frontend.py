from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
import tomllib

from .config import Config, Declaration
from .dsl import handle_shorthand
from .ir import ConfigMap, Context, Declarations


class ShorthandFrontend:
    """Parse a declarations file (TOML) into decoded configuration maps."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML declarations file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Dict[str, Any]) -> Declarations:
        cfg = Config.model_validate(config)

        meta_boxes = _decode_section(Context.META_BOX, cfg.meta_box)
        # Fields nested in a meta box use the field shorthand
        for settings in meta_boxes.values():
            if isinstance(settings.get("fields"), (dict, list)):
                settings["fields"], _ = handle_shorthand(Context.FIELD, settings["fields"])

        return Declarations(
            description=cfg.description or "",
            post_types=_decode_section(Context.POST_TYPE, cfg.post_type),
            taxonomies=_decode_section(Context.TAXONOMY, cfg.taxonomy),
            meta_boxes=meta_boxes,
            fields=_decode_section(Context.FIELD, cfg.field),
        )


def _decode_section(context: Context, section: Dict[str, Declaration]) -> Dict[str, ConfigMap]:
    decoded, _ = handle_shorthand(context, section)
    return decoded
