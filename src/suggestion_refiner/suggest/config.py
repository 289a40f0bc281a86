# src/suggestion_refiner/suggest/config.py
from __future__ import annotations

"""
config.py.

Does: Load the engine configuration (auto-correction threshold presets, per-language
      maximum auto-correct-with-space lengths, debug annotations) from
      <data>/suggest_config.json into an immutable SuggestConfig.
Returns: SuggestConfig, load_suggest_config().
Used by: Suggest (loaded once at construction), demo CLI, tests.
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from suggestion_refiner.utils.load_config import ConfigTypeError, load_config

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "SuggestConfig",
    "load_suggest_config",
    "parse_suggest_config",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "suggest_config"

_FLOAT_WORDS = {"inf": math.inf, "+inf": math.inf, "-inf": -math.inf}


@dataclass(frozen=True)
class SuggestConfig:
    """
    Read-only engine settings, safe to share between overlapping requests.

    `max_auto_correct_with_space_length` is keyed by lower-case language code.
    """

    auto_correction_threshold: float = 0.185
    max_auto_correct_with_space_length: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({"de": 12})
    )
    threshold_presets: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(
            {"off": math.inf, "modest": 0.185, "aggressive": 0.067, "very_aggressive": -math.inf}
        )
    )
    debug_suggestions: bool = False

    def __post_init__(self) -> None:
        limits = {str(k).lower(): v for k, v in dict(self.max_auto_correct_with_space_length).items()}
        object.__setattr__(self, "max_auto_correct_with_space_length", MappingProxyType(limits))
        object.__setattr__(self, "threshold_presets", MappingProxyType(dict(self.threshold_presets)))

    def threshold_for(self, preset: str) -> float:
        """Does: Resolve a named preset ('modest', 'aggressive', ...) to its float threshold."""
        try:
            return self.threshold_presets[preset]
        except KeyError:
            known = ", ".join(sorted(self.threshold_presets)) or "none"
            raise KeyError(f"Unknown threshold preset {preset!r} (known: {known})") from None


# ─────────────────────────────────────────────────────────────────────────────
# Parsing / validation
# ─────────────────────────────────────────────────────────────────────────────
def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigTypeError(f"{name}: expected a number, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value.strip().lower() in _FLOAT_WORDS:
        return _FLOAT_WORDS[value.strip().lower()]
    raise ConfigTypeError(f"{name}: expected a number or 'inf'/'-inf', got {value!r}")


def _limits(raw: Any) -> dict[str, int]:
    if not isinstance(raw, dict):
        raise ConfigTypeError(
            f"max_auto_correct_with_space_length: expected dict, got {type(raw).__name__}"
        )
    out: dict[str, int] = {}
    for lang, limit in raw.items():
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ConfigTypeError(
                f"max_auto_correct_with_space_length[{lang!r}]: expected positive int, got {limit!r}"
            )
        out[str(lang).lower()] = limit
    return out


def parse_suggest_config(data: dict[str, Any]) -> SuggestConfig:
    """
    Does: Validate a decoded suggest_config mapping.
    Returns: SuggestConfig. Raises ConfigTypeError on malformed values.
    """
    presets_raw = data.get("threshold_presets", {})
    if not isinstance(presets_raw, dict):
        raise ConfigTypeError(
            f"threshold_presets: expected dict, got {type(presets_raw).__name__}"
        )
    presets = {str(k): _as_float(f"threshold_presets[{k!r}]", v) for k, v in presets_raw.items()}

    threshold_raw = data.get("auto_correction_threshold", SuggestConfig.auto_correction_threshold)
    if isinstance(threshold_raw, str) and threshold_raw in presets:
        threshold = presets[threshold_raw]
    else:
        threshold = _as_float("auto_correction_threshold", threshold_raw)

    return SuggestConfig(
        auto_correction_threshold=threshold,
        max_auto_correct_with_space_length=_limits(
            data.get("max_auto_correct_with_space_length", {})
        ),
        threshold_presets=presets,
        debug_suggestions=bool(data.get("debug_suggestions", False)),
    )


def load_suggest_config(file: str = DEFAULT_CONFIG_FILE, **kwargs: Any) -> SuggestConfig:
    """Does: Read <data>/<file>.json and build a SuggestConfig (kwargs go to load_config)."""
    config: SuggestConfig = load_config(
        file, mode="validated_dict", validator=parse_suggest_config, **kwargs
    )
    log.debug(
        "Loaded suggest config: threshold=%s limits=%s",
        config.auto_correction_threshold,
        dict(config.max_auto_correct_with_space_length),
    )
    return config
