from __future__ import annotations

from typing import Dict, Tuple

from config_schema import Config, Record


class ResourceList(Record):
    images: Tuple[str, ...]
    sounds: Tuple[str, ...]


def resource_names(cfg: Config) -> ResourceList:
    """Asset filenames the asset pipeline has to fetch before the game can start."""
    return ResourceList(
        images=tuple(i.image_name for i in cfg.ui.images.images),
        sounds=tuple(name for s in cfg.ui.sounds.sounds for name in s.sound_names),
    )


def unlock_counts(cfg: Config) -> Dict[str, int]:
    """
    Seed for the runtime cooker counters, keyed by cooker base image.
    The returned dict belongs to the caller; the config tree itself is never mutated.
    """
    return {c.base_image: c.num_unlocked for c in cfg.ui.preparation_area.cookers}
