from __future__ import annotations
from typing import Any, Mapping
from config_errors import ConfigurationError
from config_schema import Config
from config_builder import apply_overrides, validate_record
from config_gen import gen_config
from validation_logic import validate_config

# Starts the game with every store upgrade already bought
UNLOCK_ALL = {"game": {"unlock_all": True}}


def _diff(a: Mapping[str, Any], b: Mapping[str, Any]) -> dict:
    """Compare 2 mappings and output the diff"""
    out = {}
    for k, va in a.items():
        vb = b.get(k, object())
        if isinstance(va, Mapping) and isinstance(vb, Mapping):
            sub = _diff(va, vb)
            if sub:
                out[k] = sub
        elif k not in b or va != vb:
            out[k] = va
    return out


def diff_from_defaults(cfg: Config) -> dict:
    """Minimal patch that turns the default config into cfg."""
    defaults = gen_config().model_dump(mode="python")
    return _diff(cfg.model_dump(mode="python"), defaults)


def apply_preset(cfg: Config, patch: Mapping[str, Any]) -> Config:
    """Apply a patch to cfg and re-check cross-section references."""
    return validate_config(apply_overrides(cfg, patch))


def reset_section(cfg: Config, section: str) -> Config:
    """
    Reset one section to defaults, e.g. "ui.store" or "game.money".
    A bare "ui" / "game" resets the whole layer.
    """
    layer, sep, name = section.partition(".")
    defaults = gen_config().model_dump(mode="python")
    base = cfg.model_dump(mode="python")
    if layer not in base or (sep and name not in base[layer]):
        raise ConfigurationError("reset_section", f"unknown section {section!r}", keys=[section])
    if name:
        base[layer][name] = defaults[layer][name]
    else:
        base[layer] = defaults[layer]
    return validate_config(validate_record(Config, base, "config"))
