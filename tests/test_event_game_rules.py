import json

import pytest

from mcwss.event.game_rules import GameRulesLoaded, GameRulesUpdated
from mcwss.rawjson import decode


def test_decode_loaded_rules():
    event = decode(
        GameRulesLoaded,
        json.dumps(
            {
                "commandblockoutput": True,
                "dodaylightcycle": True,
                "keepinventory": True,
                "pvp": False,
                "randomtickspeed": 1,
                "functioncommandlimit": 10000,
                "maxcommandchainlength": 65535,
                "tntexplodes": True,
            }
        ),
    )
    assert event.command_block_output is True
    assert event.do_daylight_cycle is True
    assert event.keep_inventory is True
    assert event.pvp is False
    assert event.random_tick_speed == 1
    assert event.function_command_limit == 10000
    assert event.max_command_chain_length == 65535
    assert event.tnt_explodes is True


def test_loaded_rules_missing_are_defaults():
    assert decode(GameRulesLoaded, {}) == GameRulesLoaded()


def test_loaded_rules_reject_non_boolean():
    with pytest.raises(ValueError):
        decode(GameRulesLoaded, {"pvp": "on"})


def test_loaded_rules_reject_non_numeric_speed():
    with pytest.raises(ValueError):
        decode(GameRulesLoaded, {"randomtickspeed": "fast"})


@pytest.mark.parametrize("old, new", [(True, False), (3, 5), (0.5, 1.5)])
def test_decode_updated_rule_keeps_value_types(old, new):
    event = decode(
        GameRulesUpdated,
        {"UpdatedOptionName": "keepinventory", "UpdatedOptionOldValue": old, "UpdatedOptionNewValue": new},
    )
    assert event.game_rule_name == "keepinventory"
    assert event.old_value == old and type(event.old_value) is type(old)
    assert event.new_value == new and type(event.new_value) is type(new)


def test_updated_rule_keys_case_insensitive():
    event = decode(GameRulesUpdated, {"updatedoptionname": "pvp"})
    assert event.game_rule_name == "pvp"
    assert event.new_value is None