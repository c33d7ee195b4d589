"""Events about items the player acquires, uses, crafts and equips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from mcwss.mctype import ArmourSlot
from mcwss.rawjson import json_field

ACQUISITION_PICKED_UP = 1
ACQUISITION_CRAFTED = 2
ACQUISITION_TAKEN_FROM_CONTAINER = 3
ACQUISITION_FORGED = 6
ACQUISITION_SMELTED = 7
ACQUISITION_BREWED = 8
ACQUISITION_FILLED_BOTTLE = 9
ACQUISITION_TRADED = 10
ACQUISITION_FISHED = 11

INTERACTED_USE = 0
INTERACTED_PLACE = 1

ITEM_WORN = 0
ITEM_EATEN = 1
ITEM_DRUNK = 3
ITEM_THROWN = 4
ITEM_RELEASED = 5
# Also sent for music discs, item frames, brewing stands and even cakes.
ITEM_BLOCK_ENTITY_CREATED = 6
ITEM_BOTTLE_FILLED = 7
ITEM_BUCKET_FILLED = 8
ITEM_BUCKET_EMPTIED = 9
ITEM_USED_ON_BLOCK = 10


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _to_slot(value: Any) -> Union[ArmourSlot, int]:
    number = _to_int(value)
    try:
        return ArmourSlot(number)
    except ValueError:
        return number


@dataclass
class ItemAcquired:
    """Sent when the player acquires an item, by picking it up, crafting it and so on."""

    type: int = json_field("Type", 0, _to_int)
    aux_type: int = json_field("AuxType", 0, _to_int)
    acquisition_method_id: int = json_field("AcquisitionMethodID", 0, _to_int)


@dataclass
class ItemCrafted:
    """Sent when the player crafts an item in its inventory or a crafting table."""

    type: int = json_field("Type", 0, _to_int)
    aux_type: int = json_field("AuxType", 0, _to_int)
    used_crafting_table: bool = json_field("UsedCraftingTable", False, _to_bool)
    crafting_session_id: int = json_field("CraftingSessionID", 0, _to_int)
    # The fields below apply when the recipe book was shown.
    recipe_book_shown: bool = json_field("RecipeBookShown", False, _to_bool)
    number_of_tabs_changed: int = json_field("NumberOfTabsChanged", 0, _to_int)
    ending_tab_id: int = json_field("EndingTabID", 0, _to_int)
    starting_tab_id: int = json_field("StartingTabID", 0, _to_int)
    has_craftable_filter_on: bool = json_field("HasCraftableFilterOn", False, _to_bool)
    crafted_automatically: bool = json_field("CraftedAutomatically", False, _to_bool)
    used_search_bar: bool = json_field("UsedSearchBar", False, _to_bool)


@dataclass
class ItemDropped:
    """Sent when the player drops an item from its inventory."""

    type: int = json_field("Type", 0, _to_int)
    aux_type: int = json_field("AuxType", 0, _to_int)


@dataclass
class ItemEquipped:
    """Sent when the player equips a wearable item such as armour or an elytra.

    The enchantment count may exceed three, though only three are described.
    """

    item_enchantment_count: int = json_field("ItemEnchantCount", 0, _to_int)
    item_enchantment_type_a: int = json_field("ItemEnchantTypeA", 0, _to_int)
    item_enchantment_level_a: int = json_field("ItemEnchantLevelA", 0, _to_int)
    item_enchantment_type_b: int = json_field("ItemEnchantTypeB", 0, _to_int)
    item_enchantment_level_b: int = json_field("ItemEnchantLevelB", 0, _to_int)
    item_enchantment_type_c: int = json_field("ItemEnchantTypeC", 0, _to_int)
    item_enchantment_level_c: int = json_field("ItemEnchantLevelC", 0, _to_int)
    slot: Union[ArmourSlot, int] = json_field("Slot", 0, _to_slot)
    type: int = json_field("Type", 0, _to_int)
    aux_type: int = json_field("AuxType", 0, _to_int)


@dataclass
class ItemInteracted:
    """Sent when the player interacts with a block using an item."""

    aux_type: int = json_field("Aux", 0, _to_int)
    item: str = json_field("Id", "", _to_str)
    count: int = json_field("Count", 0, _to_int)
    method: int = json_field("Method", 0, _to_int)


@dataclass
class ItemNamed:
    """Sent when the player names an item using an anvil."""

    aux_type: int = json_field("AuxType", 0, _to_int)
    type: int = json_field("Type", 0, _to_int)


@dataclass
class ItemSmelted:
    """Sent when the player takes a smelted item out of the result slot."""

    aux_type: int = json_field("AuxType", 0, _to_int)
    type: int = json_field("Type", 0, _to_int)
    fuel_source_aux_type: int = json_field("FuelSourceAuxType", 0, _to_int)
    fuel_source_type: int = json_field("FuelSourceType", 0, _to_int)


@dataclass
class ItemUsed:
    """Sent when the player uses an item."""

    type: int = json_field("Type", 0, _to_int)
    aux_type: int = json_field("AuxType", 0, _to_int)
    item_use_method: int = json_field("ItemUseMethod", 0, _to_int)