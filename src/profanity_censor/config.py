"""YAML/dict config loader for profanity-censor.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    censor:
      censor_threshold: INAPPROPRIATE
      censor_first_character_threshold: OFFENSIVE & SEVERE
      censor_replacement: "#"
      ignore_false_positives: false
      ignore_self_censoring: false
      # Extra words: name -> weights (profane, offensive, sexual, mean, evasive)
      # or a type expression.
      words:
        frick: [1, 0, 0, 0, 0]
        dingus: MEAN & MILD
      safe_words:
        - howdy
      false_positives:
        - frickle
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

from .censor import Censor, CensorConfig
from .dictionary import Dictionary, build_dictionary
from .types import InvalidOptionError, Type, parse_type
from .wordlist import default_entries

logger = logging.getLogger(__name__)

_DEFAULTS = CensorConfig()
_LOADED_KEYS = frozenset({
    "censor_threshold", "censor_first_character_threshold", "censor_replacement",
    "ignore_false_positives", "ignore_self_censoring", "words", "safe_words",
    "false_positives",
})


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "censor" key or flat
    if isinstance(data.get("censor"), dict):
        data = data["censor"]

    return {
        "censor_threshold": parse_type(
            data.get("censor_threshold", _DEFAULTS.censor_threshold)
        ),
        "censor_first_character_threshold": parse_type(
            data.get(
                "censor_first_character_threshold",
                _DEFAULTS.censor_first_character_threshold,
            )
        ),
        "censor_replacement": data.get("censor_replacement", _DEFAULTS.censor_replacement),
        "ignore_false_positives": data.get("ignore_false_positives", False),
        "ignore_self_censoring": data.get("ignore_self_censoring", False),
        "words": _parse_words(data.get("words") or {}),
        "safe_words": list(data.get("safe_words") or []),
        "false_positives": list(data.get("false_positives") or []),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path, encoding="utf-8") as f:
        return load_config(yaml.safe_load(f))


def create_censor(config: dict[str, Any] | None = None) -> Censor:
    """Create a fully configured Censor from a config dict."""
    cfg = load_config(config) if not _is_loaded(config) else config

    censor_config = CensorConfig(
        censor_threshold=cfg["censor_threshold"],
        censor_first_character_threshold=cfg["censor_first_character_threshold"],
        censor_replacement=cfg["censor_replacement"],
        ignore_false_positives=cfg["ignore_false_positives"],
        ignore_self_censoring=cfg["ignore_self_censoring"],
    )
    return Censor(censor_config, dictionary=_custom_dictionary(cfg))


def _is_loaded(config: dict[str, Any] | None) -> bool:
    return (
        bool(config)
        and set(config) >= _LOADED_KEYS
        and isinstance(config["words"], list)
    )


def _parse_words(words: Any) -> list[tuple[str, Type]]:
    if not isinstance(words, dict):
        raise InvalidOptionError("'words' must map each word to weights or a type")
    out: list[tuple[str, Type]] = []
    for word, value in words.items():
        if isinstance(value, (list, tuple)):
            if any(isinstance(w, bool) or not isinstance(w, int) or not 0 <= w <= 3 for w in value):
                raise InvalidOptionError(f"weights for {word!r} must be integers 0-3")
            out.append((str(word), Type.from_weights(list(value))))
        else:
            out.append((str(word), parse_type(value)))
    return out


def _custom_dictionary(cfg: dict[str, Any]) -> Dictionary | None:
    """The built-in pack plus configured words, or None for the shared default."""
    words = cfg["words"]
    safe_words = cfg["safe_words"]
    false_positives = cfg["false_positives"]
    if not (words or safe_words or false_positives):
        return None

    entries = list(default_entries())
    entries.extend(words)
    entries.extend((w, Type.SAFE) for w in safe_words)
    entries.extend((w, Type.NONE) for w in false_positives)
    logger.info(
        "custom dictionary: %d words, %d safe words, %d false positives",
        len(words), len(safe_words), len(false_positives),
    )
    return build_dictionary(entries)
