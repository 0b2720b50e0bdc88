"""
Entry point for building the full game configuration.

    from config_gen import gen_config

    cfg = gen_config()
    cfg.ui.order_bar.orders[0].weight      # typed access
    cfg.model_dump()                       # plain nested dicts for the renderer

The tree is built fresh on every call and is read-only; consumers that need
per-session counters keep them in their own state (see resource_logic.unlock_counts).
"""
import logging
from typing import Any, Mapping, Optional

from config_schema import Config
from game_config import gen_game_config
from ui_config import gen_ui_config
from validation_logic import validate_config

logger = logging.getLogger(__name__)


def gen_config(args: Optional[Mapping[str, Any]] = None) -> Config:
    cfg = Config(ui=gen_ui_config(args), game=gen_game_config(args))
    validate_config(cfg)
    logger.debug("Built config with %d images, %d sounds, %d orders",
                 len(cfg.ui.images.images), len(cfg.ui.sounds.sounds), len(cfg.ui.order_bar.orders))
    return cfg
