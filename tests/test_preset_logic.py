import pytest

from config_errors import ConfigurationError, DanglingReferenceError
from config_gen import gen_config
from preset_logic import UNLOCK_ALL, apply_preset, diff_from_defaults, reset_section


def test_default_config_has_empty_diff():
    assert diff_from_defaults(gen_config()) == {}


def test_unlock_all_preset():
    cfg = apply_preset(gen_config(), UNLOCK_ALL)

    assert cfg.game.unlock_all is True
    assert diff_from_defaults(cfg) == {"game": {"unlock_all": True}}


def test_diff_only_keeps_changed_leaves():
    cfg = apply_preset(gen_config(), {
        "game": {"money": {"starting_money": 500}},
        "ui": {"keyword_entry": {"caret_speed": 5}},
    })

    assert diff_from_defaults(cfg) == {
        "game": {"money": {"starting_money": 500}},
        "ui": {"keyword_entry": {"caret_speed": 5}},
    }


def test_diff_round_trips_through_apply_preset():
    cfg = apply_preset(gen_config(), {"game": {"state": {"day_length": 60}}})

    assert apply_preset(gen_config(), diff_from_defaults(cfg)) == cfg


def test_apply_preset_checks_references():
    with pytest.raises(DanglingReferenceError):
        apply_preset(gen_config(), {"ui": {"order_bar": {"money_sound": {"sound": "Kaching"}}}})


def test_reset_section_restores_defaults():
    cfg = apply_preset(gen_config(), {
        "game": {"money": {"starting_money": 500}, "state": {"day_length": 60}},
    })

    reset = reset_section(cfg, "game.money")

    assert reset.game.money.starting_money == 0
    assert reset.game.state.day_length == 60
    assert reset_section(cfg, "game") == gen_config()


def test_reset_section_rejects_unknown_section():
    with pytest.raises(ConfigurationError) as exc:
        reset_section(gen_config(), "ui.kitchen")

    assert exc.value.keys == ["ui.kitchen"]


def test_reset_section_rejects_empty_section_name():
    with pytest.raises(ConfigurationError) as exc:
        reset_section(gen_config(), "ui.")

    assert exc.value.keys == ["ui."]
