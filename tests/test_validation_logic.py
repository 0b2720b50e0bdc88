import pytest

from config_builder import apply_overrides, cooker_upgr, img, ing_upgr, ord_ing, order_cfg, recipe
from config_errors import ConfigurationError, DanglingReferenceError
from config_gen import gen_config
from config_schema import IngredientUpgrade
from validation_logic import find_problems, reachable_ingredients, validate_config


@pytest.fixture
def cfg():
    return gen_config()


def test_reachable_ingredients_cover_orders(cfg):
    reachable = reachable_ingredients(cfg)

    assert {"LettuceLeaf", "TomatoSlice", "BurgerBottom", "CookedPatty", "CurryCrab"} <= reachable
    assert "Pan" not in reachable


def test_all_dangling_references_are_reported_together(cfg):
    broken = apply_overrides(cfg, {
        "ui": {"sounds": {"sounds": [{"sound": "Coins", "sound_names": ["coins_1.mp3"]}]}},
        "game": {"ingredient_area": {"ingredients": ["LettuceLeaf"]}},
    })

    problems = find_problems(broken)

    assert "ui.preparation_area.cookers[0].cooking_sound: unknown sound 'Frying'" in problems
    assert "ui.preparation_area.cookers[1].done_cooking_sound: unknown sound 'Done'" in problems
    assert "ui.order_bar.orders[0].ings[3]: ingredient 'TomatoSlice' can never be obtained" in problems
    assert len(problems) == 4 + 3

    with pytest.raises(DanglingReferenceError) as exc:
        validate_config(broken)
    assert exc.value.problems == problems
    assert isinstance(exc.value, ConfigurationError)


def test_duplicate_image_ids(cfg):
    images = list(cfg.ui.images.images) + [img("Pan", "pan_2.png", 200, 30)]
    broken = apply_overrides(cfg, {"ui": {"images": {"images": images}}})

    assert find_problems(broken) == ["ui.images: duplicate image id 'Pan'"]


def test_missing_image_for_order_ingredient(cfg):
    orders = list(cfg.ui.order_bar.orders) + [order_cfg(1, 5, [ord_ing("Sushi", 1, 9)])]
    broken = apply_overrides(cfg, {"ui": {"order_bar": {"orders": orders}}})

    assert find_problems(broken) == [
        "ui.order_bar.orders[5].ings[0]: unknown image 'Sushi'",
        "ui.order_bar.orders[5].ings[0]: ingredient 'Sushi' can never be obtained",
    ]


def test_bounds_on_weight_chance_and_alpha(cfg):
    orders = list(cfg.ui.order_bar.orders)
    orders[1] = order_cfg(0, 5, [ord_ing("LettuceLeaf", 1.5, 8)])
    broken = apply_overrides(cfg, {
        "ui": {"order_bar": {"orders": orders}, "fps": {"alpha": 1.5}},
    })

    problems = find_problems(broken)

    assert any(p.startswith("ui.order_bar.orders[1].weight") for p in problems)
    assert "ui.order_bar.orders[1].ings[0].chance: 1.5 outside [0, 1]" in problems
    assert "ui.fps.alpha: 1.5 outside [0, 1]" in problems
    assert len(problems) == 3


def test_cooker_upgrade_needs_matching_cooker(cfg):
    upgrades = list(cfg.ui.store.upgrades) + [(cooker_upgr("Plate", 10),)]
    broken = apply_overrides(cfg, {"ui": {"store": {"upgrades": upgrades}}})

    assert find_problems(broken) == ["ui.store.upgrades[11][0].img: no cooker with base image 'Plate'"]


def test_validate_config_returns_valid_tree(cfg):
    assert validate_config(cfg) is cfg


def _with_cooker(cfg, index, **update):
    cookers = list(cfg.ui.preparation_area.cookers)
    cookers[index] = cookers[index].model_copy(update=update)
    return apply_overrides(cfg, {"ui": {"preparation_area": {"cookers": cookers}}})


def _with_track(cfg, track):
    upgrades = list(cfg.ui.store.upgrades) + [track]
    return apply_overrides(cfg, {"ui": {"store": {"upgrades": upgrades}}})


def test_unknown_cooker_base_image(cfg):
    broken = _with_cooker(cfg, 0, base_image="Wok")

    assert find_problems(broken) == [
        "ui.preparation_area.cookers[0].base_image: unknown image 'Wok'",
        "ui.store.upgrades[8][0].img: no cooker with base image 'Pan'",
        "ui.store.upgrades[8][1].img: no cooker with base image 'Pan'",
        "ui.store.upgrades[8][2].img: no cooker with base image 'Pan'",
    ]


def test_recipe_output_without_image(cfg):
    pan = cfg.ui.preparation_area.cookers[0]
    broken = _with_cooker(cfg, 0, recipes=pan.recipes + (recipe(["RawPatty"], ["BurntPatty"], 3),))

    assert find_problems(broken) == [
        "ui.preparation_area.cookers[0].recipes[3].outputs: unknown image 'BurntPatty'"]


def test_unknown_upgrade_img(cfg):
    broken = _with_track(cfg, (ing_upgr("Sushi", 5),))

    assert find_problems(broken) == ["ui.store.upgrades[11][0].img: unknown image 'Sushi'"]


def test_unknown_upgrade_overlay(cfg):
    broken = _with_track(cfg, (IngredientUpgrade(img="Flour", cost=5, overlay="OverlayStar"),))

    assert find_problems(broken) == ["ui.store.upgrades[11][0].overlay: unknown image 'OverlayStar'"]


def test_unknown_starting_ingredient(cfg):
    broken = apply_overrides(cfg, {
        "game": {"ingredient_area": {"ingredients": ["LettuceLeaf", "TomatoSlice", "Sushi"]}}})

    assert find_problems(broken) == ["game.ingredient_area.ingredients: unknown image 'Sushi'"]
