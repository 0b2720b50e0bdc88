"""Gameplay layer of the game config: economy and pacing parameters."""
import logging
from typing import Any, Mapping, Optional

from config_schema import (
    GameConfig,
    IngredientAreaGameConfig,
    MoneyGameConfig,
    OrderBarGameConfig,
    StateGameConfig,
)

logger = logging.getLogger(__name__)


def gen_game_config(args: Optional[Mapping[str, Any]] = None) -> GameConfig:
    logger.debug("Assembling game config (args=%r)", args)
    return GameConfig(
        word_level=0,
        unlock_all=False,
        ingredient_area=IngredientAreaGameConfig(ingredients=("LettuceLeaf", "TomatoSlice")),
        order_bar=OrderBarGameConfig(order_period=6),
        state=StateGameConfig(
            day_length=90,
            money_down_sec=3,       # every this many seconds...
            money_down_amt=-1,      # ...money changes by this much
        ),
        money=MoneyGameConfig(starting_money=0, max_money=100),
    )
