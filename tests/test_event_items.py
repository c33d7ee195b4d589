import json

import pytest

from mcwss.event import items
from mcwss.event.items import (
    ItemAcquired,
    ItemCrafted,
    ItemDropped,
    ItemEquipped,
    ItemInteracted,
    ItemNamed,
    ItemSmelted,
    ItemUsed,
)
from mcwss.mctype import ArmourSlot
from mcwss.rawjson import decode


def test_item_acquired_from_text():
    data = json.dumps({"Type": 264, "AuxType": 0, "AcquisitionMethodID": items.ACQUISITION_FISHED})
    event = decode(ItemAcquired, data)
    assert event.type == 264
    assert event.aux_type == 0
    assert event.acquisition_method_id == items.ACQUISITION_FISHED


def test_acquisition_constants_skip_unused_values():
    event = decode(ItemAcquired, {"AcquisitionMethodID": items.ACQUISITION_TAKEN_FROM_CONTAINER + 3})
    assert event.acquisition_method_id == items.ACQUISITION_FORGED
    assert decode(ItemAcquired, {"AcquisitionMethodID": 11}).acquisition_method_id == items.ACQUISITION_FISHED


def test_item_used_constants():
    event = decode(ItemUsed, {"ItemUseMethod": items.ITEM_EATEN + 2})
    assert event.item_use_method == items.ITEM_DRUNK
    assert decode(ItemUsed, {"ItemUseMethod": 10}).item_use_method == items.ITEM_USED_ON_BLOCK


def test_item_crafted_fields():
    payload = {
        "Type": 5,
        "AuxType": 2,
        "UsedCraftingTable": True,
        "CraftingSessionID": 7,
        "RecipeBookShown": True,
        "NumberOfTabsChanged": 9,
        "EndingTabID": 3,
        "StartingTabID": 1,
        "HasCraftableFilterOn": True,
        "CraftedAutomatically": False,
        "UsedSearchBar": True,
    }
    event = decode(ItemCrafted, payload)
    assert event == ItemCrafted(
        type=5,
        aux_type=2,
        used_crafting_table=True,
        crafting_session_id=7,
        recipe_book_shown=True,
        number_of_tabs_changed=9,
        ending_tab_id=3,
        starting_tab_id=1,
        has_craftable_filter_on=True,
        crafted_automatically=False,
        used_search_bar=True,
    )


def test_item_crafted_rejects_non_bool():
    with pytest.raises(ValueError):
        decode(ItemCrafted, {"UsedCraftingTable": 1})


def test_item_dropped_defaults_when_missing():
    assert decode(ItemDropped, {}) == ItemDropped(type=0, aux_type=0)


def test_item_equipped_slot_becomes_armour_slot():
    event = decode(ItemEquipped, {"Slot": 2, "Type": 298, "ItemEnchantCount": 4,
                                  "ItemEnchantTypeA": 1, "ItemEnchantLevelA": 3})
    assert event.slot is ArmourSlot.HELMET
    assert event.type == 298
    assert event.item_enchantment_count == 4
    assert event.item_enchantment_type_a == 1
    assert event.item_enchantment_level_a == 3


def test_item_equipped_unknown_slot_kept_as_int():
    event = decode(ItemEquipped, {"Slot": 9})
    assert event.slot == 9
    assert not isinstance(event.slot, ArmourSlot)


def test_item_interacted_uses_short_keys():
    event = decode(ItemInteracted, {"Aux": 1, "Id": "wooden_door", "Count": 3,
                                    "Method": items.INTERACTED_PLACE})
    assert event.aux_type == 1
    assert event.item == "wooden_door"
    assert event.count == 3
    assert event.method == items.INTERACTED_PLACE


def test_item_interacted_rejects_numeric_id():
    with pytest.raises(ValueError):
        decode(ItemInteracted, {"Id": 5})


def test_item_named_case_insensitive_keys():
    event = decode(ItemNamed, {"auxtype": 4, "TYPE": 276})
    assert (event.aux_type, event.type) == (4, 276)


def test_item_smelted_fields():
    event = decode(ItemSmelted, {"AuxType": 0, "Type": 265,
                                 "FuelSourceAuxType": 1, "FuelSourceType": 263})
    assert event.fuel_source_type == 263
    assert event.fuel_source_aux_type == 1
    assert event.type == 265


def test_item_used_integral_float_accepted_fraction_rejected():
    assert decode(ItemUsed, {"ItemUseMethod": 4.0}).item_use_method == 4
    with pytest.raises(ValueError):
        decode(ItemUsed, {"ItemUseMethod": 4.5})


def test_item_used_null_keeps_default():
    assert decode(ItemUsed, {"Type": None}).type == 0