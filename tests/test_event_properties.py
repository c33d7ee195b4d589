import json

import pytest

from mcwss.event.properties import Properties
from mcwss.rawjson import decode


def test_decode_renamed_keys():
    data = {
        "BuildPlat": 7,
        "Cheevos": True,
        "Dim": 1,
        "Plat": "Win 10.0",
        "Seq": 42,
        "ClientId": "client-id",
        "isTrial": 0,
        "editionType": "win10",
        "locale": "en_US",
        "vrMode": False,
    }
    properties = decode(Properties, data)
    assert properties.build_platform == 7
    assert properties.achievements is True
    assert properties.dimension == 1
    assert properties.platform == "Win 10.0"
    assert properties.sequence == 42
    assert properties.client_id == "client-id"
    assert properties.edition_type == "win10"
    assert properties.locale == "en_US"
    assert properties.vr_mode is False


def test_decode_plain_field_names_case_insensitively():
    properties = decode(Properties, json.dumps({"accounttype": 1, "Biome": 3, "Build": "1.9.0"}))
    assert properties.account_type == 1
    assert properties.biome == 3
    assert properties.build == "1.9.0"


def test_decode_missing_keys_are_defaults():
    assert decode(Properties, {}) == Properties()


def test_decode_ignores_unknown_keys():
    assert decode(Properties, {"SomethingNew": 5}) == Properties()


def test_decode_rejects_non_boolean_flag():
    with pytest.raises(ValueError):
        decode(Properties, {"Cheevos": "yes"})


def test_decode_rejects_malformed_json():
    with pytest.raises(ValueError):
        decode(Properties, "{not json")