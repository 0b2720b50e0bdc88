"""Presentation layer of the game config: widget placement, styling and the content catalogs."""
import logging
from typing import Any, Mapping, Optional

from config_builder import (
    bg_cfg,
    cooker_cfg,
    cooker_upgr,
    img,
    ing_upgr,
    limit_upgr,
    ord_ing,
    order_cfg,
    playback_cfg,
    pos,
    progress_cfg,
    recipe,
    snd,
    text_cfg,
)
from config_schema import (
    ImagesConfig,
    IngredientAreaUiConfig,
    KeywordEntryUiConfig,
    MoneyUiConfig,
    OrderBarUiConfig,
    PreparationAreaConfig,
    SoundsConfig,
    StateUiConfig,
    StoreConfig,
    UiConfig,
)

logger = logging.getLogger(__name__)


def _images() -> ImagesConfig:
    return ImagesConfig(
        scale=1.0,
        images=(
            img("BaconCooked",    "bacon_cooked.png",     100.0, 70.0),
            img("BaconRaw",       "bacon_raw.png",        100.0, 60.0),
            img("BurgerBottom",   "burger_bottom.png",    100.0, 30.0),
            img("BurgerTop",      "burger_top.png",       100.0, 30.0),
            img("ClosedSign",     "closed_sign.png",      300.0, 200.0),
            img("CookedPatty",    "cooked_patty.png",     100.0, 30.0),
            img("Curry",          "curry.png",            100.0, 140.0),
            img("CurryCrab",      "curry_crab.png",       150.0, 100.0),
            img("Dumplings",      "dumplings.png",        100.0, 60.0),
            img("EggsFried",      "eggs_fried.png",       100.0, 70.0),
            img("EggsRaw",        "eggs_raw.png",         100.0, 60.0),
            img("Flour",          "flour.png",            100.0, 100.0),
            img("LettuceLeaf",    "lettuce_leaf.png",     100.0, 30.0),
            img("MoneyBag",       "money_bag.png",        100.0, 120.0),
            img("OpenSign",       "open_sign.png",        300.0, 200.0),
            img("OverlayArrowUp", "overlay_arrow_up.png", 40.0, 40.0),
            img("OverlayPlus",    "overlay_plus.png",     40.0, 40.0),
            img("Pan",            "pan.png",              200.0, 30.0),
            img("Plate",          "plate.png",            100.0, 30.0),
            img("RawCrab",        "raw_crab.png",         100.0, 60.0),
            img("RawPatty",       "raw_patty.png",        100.0, 30.0),
            img("TomatoSlice",    "tomato_slice.png",     100.0, 30.0),
            img("TriniPot",       "trini_pot.png",        180.0, 100.0),
        ),
    )


def _sounds() -> SoundsConfig:
    return SoundsConfig(sounds=(
        snd("Coins", ["coins_1.mp3", "coins_2.mp3", "coins_3.mp3"]),
        snd("Frying", ["frying_1.mp3"]),
        snd("Done", ["done_1.mp3"]),
    ))


def _order_bar() -> OrderBarUiConfig:
    return OrderBarUiConfig(
        pos=pos(1200, 400),
        order_margin=20,
        bg=bg_cfg(-50, -300, 1340, 500, "black", "pink"),
        text_price=text_cfg(0, 40, 48, {"center_and_fit": True}),
        text_keyword=text_cfg(0, 100, 48, {"center_and_fit": True, "is_command": True}),
        text_remaining=text_cfg(10, -270, 48, {"style": "white"}),
        progress_bar=progress_cfg(0, 30, 100, 5),
        money_sound=playback_cfg("Coins"),
        orders=(
            order_cfg(1, 5, [  # burger
                ord_ing("BurgerBottom", 1, 3),
                ord_ing("CookedPatty", 1, 8),
                ord_ing("LettuceLeaf", .7, 4),
                ord_ing("TomatoSlice", .6, 5),
                ord_ing("BurgerTop", 1, 3)]),
            order_cfg(.5, 5, [  # salad
                ord_ing("LettuceLeaf", 1, 8),
                ord_ing("TomatoSlice", 1, 10)]),
            order_cfg(.5, 8, [  # curry crab
                ord_ing("CurryCrab", 1, 30),
                ord_ing("Dumplings", 1, 10)]),
            order_cfg(1, 8, [  # egg sandwich
                ord_ing("BurgerBottom", 1, 5),
                ord_ing("EggsFried", 1, 7),
                ord_ing("BaconCooked", .3, 8),
                ord_ing("BurgerTop", 1, 5)]),
            order_cfg(1, 8, [  # bacon sandwich
                ord_ing("BurgerBottom", 1, 5),
                ord_ing("BaconCooked", 1, 8),
                ord_ing("LettuceLeaf", .8, 3),
                ord_ing("TomatoSlice", .7, 4),
                ord_ing("BurgerTop", 1, 5)]),
        ),
    )


def _ingredient_area() -> IngredientAreaUiConfig:
    return IngredientAreaUiConfig(
        pos=pos(80, 800),
        grid_width=5,
        grid_item_width=170,
        grid_item_height=200,
        bg=bg_cfg(-50, -150, 900, 500, "black", "orange", {"border_alpha": .3, "border_width": 5}),
        text=text_cfg(0, 0, 48, {"center_and_fit": True, "is_command": True}),
    )


def _preparation_area() -> PreparationAreaConfig:
    return PreparationAreaConfig(
        pos=pos(1200, 800),
        bg=bg_cfg(-50, -70, 1300, 700, "black", "orange", {"border_alpha": 0.3}),
        text=text_cfg(0, 0, 48, {"center_and_fit": True, "is_command": True}),
        progress=progress_cfg(0, 30, 100, 5),
        cookers=(
            cooker_cfg("Pan",
                       pos(-10, 10),
                       playback_cfg("Frying", {"random_start": True}),
                       playback_cfg("Done"),
                       [
                           recipe(["RawPatty"], ["CookedPatty"], 10),
                           recipe(["EggsRaw"], ["EggsFried"], 6),
                           recipe(["BaconRaw"], ["BaconCooked"], 8),
                       ],
                       [pos(0, 100), pos(300, 100), pos(600, 100)]),
            cooker_cfg("TriniPot",
                       pos(0, 10),
                       playback_cfg("Frying", {"random_start": True}),
                       playback_cfg("Done"),
                       [
                           recipe(["RawCrab", "Curry"], ["CurryCrab"], 15),
                           recipe(["Flour"], ["Dumplings"], 5),
                       ],
                       [pos(0, 550), pos(300, 550), pos(600, 550)]),
        ),
    )


def _store() -> StoreConfig:
    return StoreConfig(
        pos=pos(40, 600),
        bg=bg_cfg(-20, -180, 2000, 500, "black", "gold", {"border_alpha": .3}),
        text_keyword=text_cfg(0, 0, 48, {"center_and_fit": True, "is_command": True}),
        text_price=text_cfg(0, 40, 48, {"style": "gold", "center_and_fit": True}),
        upgrades=(
            (ing_upgr("BurgerBottom", 10),),
            (ing_upgr("BurgerTop", 10),),
            (ing_upgr("RawPatty", 40),),
            (ing_upgr("BaconRaw", 30),),
            (ing_upgr("EggsRaw", 30),),
            (ing_upgr("Flour", 20),),
            (ing_upgr("Curry", 20),),
            (ing_upgr("RawCrab", 100),),
            (cooker_upgr("Pan", 50), cooker_upgr("Pan", 200), cooker_upgr("Pan", 300)),
            (cooker_upgr("TriniPot", 200), cooker_upgr("TriniPot", 300), cooker_upgr("TriniPot", 400)),
            (limit_upgr("MoneyBag", 80), limit_upgr("MoneyBag", 180), limit_upgr("MoneyBag", 380)),
        ),
    )


def _keyword_entry() -> KeywordEntryUiConfig:
    return KeywordEntryUiConfig(
        pos=pos(20, 1300),
        caret_speed=3,
        bg=bg_cfg(-10, -25, 1000, 100, "black", "white",
                  {"border_alpha": .3, "border_width": 5, "bg_alpha": .8}),
        text=text_cfg(0, 0, 48, {"style": "black", "alpha": 1}),
    )


def _state() -> StateUiConfig:
    return StateUiConfig(
        pos=pos(650, 250),
        # the misspelled "birder_alpha" override never took effect, border_alpha stays at its default
        bg=bg_cfg(-50, -70, 500, 500, "black", "orange"),
        clock_r1=150,
        clock_r2=50,
        text=text_cfg(0, 0, 48, {"center_and_fit": True, "is_command": True}),
        progress=progress_cfg(0, 0, 200, 5),
    )


def _money() -> MoneyUiConfig:
    return MoneyUiConfig(
        pos=pos(50, 50),
        bg=bg_cfg(0, -20, 400, 250, "black", "green", {"border_alpha": .3}),
        text=text_cfg(40, 40, 128, {"style": "black", "stroke": True, "alpha": 1}),
    )


def gen_ui_config(args: Optional[Mapping[str, Any]] = None) -> UiConfig:
    """Assemble every UI section. ``args`` is reserved and currently unused."""
    logger.debug("Assembling ui config (args=%r)", args)
    return UiConfig(
        images=_images(),
        sounds=_sounds(),
        order_bar=_order_bar(),
        ingredient_area=_ingredient_area(),
        preparation_area=_preparation_area(),
        store=_store(),
        keyword_entry=_keyword_entry(),
        state=_state(),
        money=_money(),
        fps=text_cfg(0, 0, 30, {"style": "black", "alpha": .7}),
    )
