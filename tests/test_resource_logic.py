from config_gen import gen_config
from resource_logic import resource_names, unlock_counts


def test_resource_names_lists_every_asset():
    resources = resource_names(gen_config())

    assert len(resources.images) == 23
    assert resources.images[0] == "bacon_cooked.png"
    assert resources.sounds == ("coins_1.mp3", "coins_2.mp3", "coins_3.mp3", "frying_1.mp3", "done_1.mp3")


def test_unlock_counts_is_owned_by_the_caller():
    cfg = gen_config()

    counts = unlock_counts(cfg)
    counts["Pan"] += 1

    assert counts == {"Pan": 1, "TriniPot": 0}
    assert unlock_counts(cfg) == {"Pan": 0, "TriniPot": 0}
    assert cfg.ui.preparation_area.cookers[0].num_unlocked == 0
