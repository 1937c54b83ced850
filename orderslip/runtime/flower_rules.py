"""Runtime loader for flower keyword rules."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from orderslip.runtime.logging import get_logger
from orderslip.slip.flower_categories import RUNG_NAMES, FlowerKeywordRules, build_flower_keyword_rules

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        logger.warning("Keyword rules file not found: %s", path)
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_flower_keyword_rules(paths: tuple[str, ...] = ()) -> FlowerKeywordRules:
    """Load keyword extensions from TOML files into frozen in-memory rules.

    Each file may hold a ``[keywords]`` table mapping rung names
    (``sunflower``, ``imported``, ``red``, ...) to extra keywords. Later files
    extend earlier ones; the built-in vocabulary is always the base.

    Args:
        paths: TOML files to layer on top of the defaults, in order.
    """
    configs = []
    for raw_path in paths:
        path = Path(raw_path)
        config = _load_toml(path)
        keywords = config.get("keywords", {})
        if isinstance(keywords, dict):
            for rung in sorted(set(keywords) - RUNG_NAMES):
                logger.warning("Ignoring unknown keyword rung %r in %s", rung, path)
        configs.append(config)

    rules = build_flower_keyword_rules(configs)
    logger.debug("Loaded flower keyword rules from %d file(s)", len(configs))
    return rules
