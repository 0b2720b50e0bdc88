import logging
from copy import deepcopy
from functools import partial
from typing import Any, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import ValidationError

from config_errors import ConfigurationError
from config_schema import (
    UPGRADE_KINDS,
    Config,
    CookerConfig,
    ImageConfig,
    OrderConfig,
    OrderIngredientConfig,
    PanelConfig,
    PlaybackConfig,
    Position,
    ProgressConfig,
    RecipeConfig,
    Record,
    SoundConfig,
    TextConfig,
    Upgrade,
    UpgradeAction,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)
Overrides = Optional[Mapping[str, Any]]


def deep_update(base: dict, patch: Mapping[str, Any]) -> dict:
    base = deepcopy(base)
    for k, v in patch.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), dict):
            base[k] = deep_update(base[k], v)
        else:
            base[k] = v
    return base


def _dotted(loc) -> str:
    return ".".join(str(part) for part in loc)


def _as_config_error(path: str, exc: ValidationError) -> ConfigurationError:
    errors = exc.errors()
    unknown = [_dotted(err["loc"]) for err in errors if err["type"] == "extra_forbidden"]
    if unknown:
        return ConfigurationError(path, f"unknown key(s): {', '.join(unknown)}", keys=unknown)
    bad = [_dotted(err["loc"]) for err in errors]
    return ConfigurationError(path, f"{bad[0]}: {errors[0]['msg']}", keys=bad)


def validate_record(model: Type[R], data: Mapping[str, Any], path: str) -> R:
    """Validate ``data`` against ``model``, reporting failures as ConfigurationError."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise _as_config_error(path, exc) from exc


def merge_record(model: Type[R], required: Mapping[str, Any], overrides: Overrides, path: str) -> R:
    """
    Merge caller overrides over the required fields of ``model``.
    Fields left out by both fall back to the schema defaults; an override
    key the schema does not declare is rejected.
    """
    data = deep_update(dict(required), overrides) if overrides else dict(required)
    return validate_record(model, data, path)


# --- Primitive builders ---

def pos(x: float, y: float) -> Position:
    return validate_record(Position, {"x": x, "y": y}, "pos")


def bg_cfg(x: float, y: float, width: float, height: float,
           border_style: str, bg_style: str, overrides: Overrides = None) -> PanelConfig:
    required = {
        "offset": {"x": x, "y": y},
        "width": width,
        "height": height,
        "border_style": border_style,
        "bg_style": bg_style,
    }
    return merge_record(PanelConfig, required, overrides, "bg_cfg")


def text_cfg(x: float, y: float, size: int, overrides: Overrides = None) -> TextConfig:
    required = {"offset": {"x": x, "y": y}, "size": size}
    return merge_record(TextConfig, required, overrides, "text_cfg")


def progress_cfg(x: float, y: float, width: float, height: float) -> ProgressConfig:
    # Progress bars sit on a flat, borderless panel
    bg = bg_cfg(x, y, width, height, "black", "black",
                {"corner_radius": 5, "border_alpha": 0, "border_width": 0, "bg_alpha": .4})
    return validate_record(ProgressConfig, {"bg": bg}, "progress_cfg")


def playback_cfg(sound: str, overrides: Overrides = None) -> PlaybackConfig:
    return merge_record(PlaybackConfig, {"sound": sound}, overrides, "playback_cfg")


# --- Composite builders ---

def img(image: str, image_name: str, width: float, height: float) -> ImageConfig:
    return validate_record(
        ImageConfig,
        {"image": image, "image_name": image_name, "width": width, "height": height},
        "img")


def snd(sound: str, sound_names: Sequence[str]) -> SoundConfig:
    return validate_record(SoundConfig, {"sound": sound, "sound_names": tuple(sound_names)}, "snd")


def ord_ing(ing: str, chance: float, price: int) -> OrderIngredientConfig:
    return validate_record(OrderIngredientConfig, {"ing": ing, "chance": chance, "price": price}, "ord_ing")


def order_cfg(weight: float, depreciation_seconds: float,
              ings: Sequence[OrderIngredientConfig]) -> OrderConfig:
    return validate_record(
        OrderConfig,
        {"weight": weight, "depreciation_seconds": depreciation_seconds, "ings": tuple(ings)},
        "order_cfg")


def recipe(inputs: Sequence[str], outputs: Sequence[str], cook_time: float) -> RecipeConfig:
    return validate_record(
        RecipeConfig,
        {"inputs": tuple(inputs), "outputs": tuple(outputs), "cook_time": cook_time},
        "recipe")


def cooker_cfg(base_image: str, base_offset: Position,
               cooking_sound: PlaybackConfig, done_cooking_sound: PlaybackConfig,
               recipes: Sequence[RecipeConfig], instances: Sequence[Position]) -> CookerConfig:
    return validate_record(
        CookerConfig,
        {
            "base_image": base_image,
            "base_offset": base_offset,
            "cooking_sound": cooking_sound,
            "done_cooking_sound": done_cooking_sound,
            "recipes": tuple(recipes),
            "instances": tuple(instances),
            "num_unlocked": 0,
        },
        "cooker_cfg")


def upgrade(action: UpgradeAction, img: str, cost: int) -> Upgrade:
    """Build the upgrade variant tagged by ``action``; the overlay follows from the kind."""
    kind = UPGRADE_KINDS.get(action)
    if kind is None:
        raise ConfigurationError("upgrade", f"unknown action {action!r}", keys=[action])
    return validate_record(kind, {"img": img, "cost": cost}, "upgrade")


ing_upgr = partial(upgrade, "UnlockIngredient")
cooker_upgr = partial(upgrade, "UnlockCooker")
limit_upgr = partial(upgrade, "IncreaseLimit")


# --- Whole-tree overrides ---

def apply_overrides(cfg: Config, patch: Overrides) -> Config:
    """Return a new tree with ``patch`` merged over ``cfg``; ``cfg`` is left untouched."""
    data = cfg.model_dump(mode="python")
    if patch:
        logger.debug("Applying overrides to sections: %s", sorted(patch))
        data = deep_update(data, patch)
    return validate_record(Config, data, "config")
