"""
Cross-section checks on an assembled config.

Builders only guarantee each record matches its own schema. The identifiers
that tie sections together (image ids, sound ids, ingredient names) and the
numeric bounds of probabilities and alphas are checked here, once, over the
whole tree, and every problem found is reported together.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterator, List, Set, Tuple

from config_errors import DanglingReferenceError
from config_schema import Config, Record

logger = logging.getLogger(__name__)


def _duplicates(ids) -> List[str]:
    return sorted(k for k, n in Counter(ids).items() if n > 1)


def _walk_alphas(node: Any, path: str) -> Iterator[Tuple[str, float]]:
    if isinstance(node, Record):
        for name in type(node).model_fields:
            value = getattr(node, name)
            if name.endswith("_alpha") or name == "alpha":
                yield f"{path}.{name}", value
            else:
                yield from _walk_alphas(value, f"{path}.{name}")
    elif isinstance(node, tuple):
        for i, item in enumerate(node):
            yield from _walk_alphas(item, f"{path}[{i}]")


def reachable_ingredients(cfg: Config) -> Set[str]:
    """Ingredients a player can ever hold: starting ones, store unlocks and recipe outputs."""
    found = set(cfg.game.ingredient_area.ingredients)
    for track in cfg.ui.store.upgrades:
        found.update(u.img for u in track if u.action == 'UnlockIngredient')
    for cooker in cfg.ui.preparation_area.cookers:
        for r in cooker.recipes:
            found.update(r.outputs)
    return found


def find_problems(cfg: Config) -> List[str]:
    problems: List[str] = []
    ui = cfg.ui

    image_ids = [i.image for i in ui.images.images]
    sound_ids = [s.sound for s in ui.sounds.sounds]
    for dup in _duplicates(image_ids):
        problems.append(f"ui.images: duplicate image id {dup!r}")
    for dup in _duplicates(sound_ids):
        problems.append(f"ui.sounds: duplicate sound id {dup!r}")
    images, sounds = set(image_ids), set(sound_ids)

    def need_sound(where: str, sound: str) -> None:
        if sound not in sounds:
            problems.append(f"{where}: unknown sound {sound!r}")

    def need_image(where: str, image: str) -> None:
        if image not in images:
            problems.append(f"{where}: unknown image {image!r}")

    reachable = reachable_ingredients(cfg)

    def need_ingredient(where: str, ing: str) -> None:
        need_image(where, ing)
        if ing not in reachable:
            problems.append(f"{where}: ingredient {ing!r} can never be obtained")

    need_sound("ui.order_bar.money_sound", ui.order_bar.money_sound.sound)

    for i, order in enumerate(ui.order_bar.orders):
        where = f"ui.order_bar.orders[{i}]"
        if order.weight <= 0:
            problems.append(f"{where}.weight: must be positive, got {order.weight}")
        for j, oi in enumerate(order.ings):
            need_ingredient(f"{where}.ings[{j}]", oi.ing)
            if not 0 <= oi.chance <= 1:
                problems.append(f"{where}.ings[{j}].chance: {oi.chance} outside [0, 1]")

    cooker_images = set()
    for i, cooker in enumerate(ui.preparation_area.cookers):
        where = f"ui.preparation_area.cookers[{i}]"
        cooker_images.add(cooker.base_image)
        need_image(f"{where}.base_image", cooker.base_image)
        need_sound(f"{where}.cooking_sound", cooker.cooking_sound.sound)
        need_sound(f"{where}.done_cooking_sound", cooker.done_cooking_sound.sound)
        for j, r in enumerate(cooker.recipes):
            for ing in r.inputs:
                need_ingredient(f"{where}.recipes[{j}].inputs", ing)
            for ing in r.outputs:
                need_image(f"{where}.recipes[{j}].outputs", ing)

    for i, track in enumerate(ui.store.upgrades):
        for j, upgr in enumerate(track):
            where = f"ui.store.upgrades[{i}][{j}]"
            need_image(f"{where}.img", upgr.img)
            need_image(f"{where}.overlay", upgr.overlay)
            if upgr.action == 'UnlockCooker' and upgr.img not in cooker_images:
                problems.append(f"{where}.img: no cooker with base image {upgr.img!r}")

    for ing in cfg.game.ingredient_area.ingredients:
        need_image("game.ingredient_area.ingredients", ing)

    for where, alpha in _walk_alphas(ui, "ui"):
        if not 0 <= alpha <= 1:
            problems.append(f"{where}: {alpha} outside [0, 1]")

    return problems


def validate_config(cfg: Config) -> Config:
    """Return ``cfg`` unchanged, or raise DanglingReferenceError listing every problem."""
    problems = find_problems(cfg)
    if problems:
        logger.debug("Config failed validation with %d problem(s)", len(problems))
        raise DanglingReferenceError(problems)
    return cfg
