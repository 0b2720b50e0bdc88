from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Optional, Tuple, Union


class Record(BaseModel):
    # Every config record is read-only and rejects fields it does not declare
    model_config = ConfigDict(extra="forbid", frozen=True)


class Position(Record):
    x: float
    y: float


class PanelConfig(Record):
    offset: Position
    width: float
    height: float
    corner_radius: float = 30.0
    border_style: str
    border_alpha: float = 1.0
    border_width: float = 5.0
    bg_style: str
    bg_alpha: float = 0.2


class TextConfig(Record):
    offset: Position
    font: str = "comic sans"
    style: str = "yellow"
    stroke: bool = False
    size: int
    center_and_fit: bool = False
    alpha: float = 0.4
    is_command: bool = False        # text is a typed keyword, not a static label


class ProgressConfig(Record):
    done_alpha: float = 1.0
    done_style: str = "yellow"
    bg: PanelConfig


class PlaybackConfig(Record):
    sound: str                      # must name an entry of ui.sounds
    play_length: Optional[float] = None
    random_start: bool = False


# --- Asset catalogs ---

class ImageConfig(Record):
    image: str                      # symbolic id used by ingredients, cookers, upgrades
    image_name: str                 # backing asset filename
    width: float
    height: float


class ImagesConfig(Record):
    scale: float = 1.0
    images: Tuple[ImageConfig, ...] = ()


class SoundConfig(Record):
    sound: str
    sound_names: Tuple[str, ...]    # variants, one is picked at random


class SoundsConfig(Record):
    sounds: Tuple[SoundConfig, ...] = ()


# --- Orders ---

class OrderIngredientConfig(Record):
    ing: str
    chance: float                   # probability the ingredient is part of the order
    price: int


class OrderConfig(Record):
    weight: float                   # relative chance of picking this order
    depreciation_seconds: float     # seconds until the order price drops
    ings: Tuple[OrderIngredientConfig, ...]


# --- Cookers ---

class RecipeConfig(Record):
    inputs: Tuple[str, ...]
    outputs: Tuple[str, ...]
    cook_time: float


class CookerConfig(Record):
    base_image: str
    base_offset: Position
    cooking_sound: PlaybackConfig
    done_cooking_sound: PlaybackConfig
    recipes: Tuple[RecipeConfig, ...]
    instances: Tuple[Position, ...]
    num_unlocked: int = Field(default=0, ge=0)  # initial count, runtime keeps its own copy


# --- Store upgrades ---

UpgradeAction = Literal['UnlockIngredient', 'UnlockCooker', 'IncreaseLimit']


class IngredientUpgrade(Record):
    action: Literal['UnlockIngredient'] = 'UnlockIngredient'
    img: str
    cost: int
    overlay: str = "OverlayPlus"


class CookerUpgrade(Record):
    action: Literal['UnlockCooker'] = 'UnlockCooker'
    img: str
    cost: int
    overlay: str = "OverlayPlus"


class LimitUpgrade(Record):
    action: Literal['IncreaseLimit'] = 'IncreaseLimit'
    img: str
    cost: int
    overlay: str = "OverlayArrowUp"


Upgrade = Annotated[
    Union[IngredientUpgrade, CookerUpgrade, LimitUpgrade],
    Field(discriminator='action'),
]

UPGRADE_KINDS = {
    'UnlockIngredient': IngredientUpgrade,
    'UnlockCooker': CookerUpgrade,
    'IncreaseLimit': LimitUpgrade,
}


# --- UI sections ---

class OrderBarUiConfig(Record):
    pos: Position
    order_margin: float
    bg: PanelConfig
    text_price: TextConfig
    text_keyword: TextConfig
    text_remaining: TextConfig
    progress_bar: ProgressConfig
    money_sound: PlaybackConfig
    orders: Tuple[OrderConfig, ...]


class IngredientAreaUiConfig(Record):
    pos: Position
    grid_width: int
    grid_item_width: float
    grid_item_height: float
    bg: PanelConfig
    text: TextConfig


class PreparationAreaConfig(Record):
    pos: Position
    bg: PanelConfig
    text: TextConfig
    progress: ProgressConfig
    cookers: Tuple[CookerConfig, ...]


class StoreConfig(Record):
    pos: Position
    bg: PanelConfig
    text_keyword: TextConfig
    text_price: TextConfig
    upgrades: Tuple[Tuple[Upgrade, ...], ...]   # one track per entry, tiers bought in order


class KeywordEntryUiConfig(Record):
    pos: Position
    caret_speed: float
    bg: PanelConfig
    text: TextConfig


class StateUiConfig(Record):
    pos: Position
    bg: PanelConfig
    clock_r1: float
    clock_r2: float
    text: TextConfig
    progress: ProgressConfig


class MoneyUiConfig(Record):
    pos: Position
    bg: PanelConfig
    text: TextConfig


class UiConfig(Record):
    images: ImagesConfig
    sounds: SoundsConfig
    order_bar: OrderBarUiConfig
    ingredient_area: IngredientAreaUiConfig
    preparation_area: PreparationAreaConfig
    store: StoreConfig
    keyword_entry: KeywordEntryUiConfig
    state: StateUiConfig
    money: MoneyUiConfig
    fps: TextConfig


# --- Game sections ---

class IngredientAreaGameConfig(Record):
    ingredients: Tuple[str, ...] = ()   # unlocked at the start of the game


class OrderBarGameConfig(Record):
    order_period: float = 6.0


class StateGameConfig(Record):
    day_length: float = 90.0
    money_down_sec: float = 3.0
    money_down_amt: int = -1


class MoneyGameConfig(Record):
    starting_money: int = 0
    max_money: int = 100


class GameConfig(Record):
    word_level: int = 0
    unlock_all: bool = False
    ingredient_area: IngredientAreaGameConfig = IngredientAreaGameConfig()
    order_bar: OrderBarGameConfig = OrderBarGameConfig()
    state: StateGameConfig = StateGameConfig()
    money: MoneyGameConfig = MoneyGameConfig()


class Config(Record):
    ui: UiConfig
    game: GameConfig
