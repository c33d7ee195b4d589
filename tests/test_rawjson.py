from dataclasses import dataclass

import pytest

from mcwss.rawjson import decode, json_field


@dataclass
class _Sample:
    name: str = json_field("name", "", str)
    count: int = json_field("statusCode", 0, int)
    tags: list = json_field("tags", [], list)
    flag: bool = json_field("isFlag", False)


def test_decode_text():
    sample = decode(_Sample, '{"name": "steve", "statusCode": 3, "tags": ["a"], "isFlag": true}')
    assert sample == _Sample(name="steve", count=3, tags=["a"], flag=True)


def test_decode_bytes_and_mapping_agree():
    document = {"name": "alex", "statusCode": 7}
    assert decode(_Sample, b'{"name": "alex", "statusCode": 7}') == decode(_Sample, document)


def test_missing_and_null_keep_defaults():
    sample = decode(_Sample, '{"name": null}')
    assert sample == _Sample()


def test_keys_match_case_insensitively():
    sample = decode(_Sample, {"NAME": "steve", "statuscode": 2})
    assert sample.name == "steve"
    assert sample.count == 2


def test_exact_key_preferred():
    sample = decode(_Sample, {"Name": "other", "name": "steve"})
    assert sample.name == "steve"


def test_list_defaults_are_not_shared():
    first = decode(_Sample, "{}")
    first.tags.append("x")
    assert decode(_Sample, "{}").tags == []


def test_json_null_document_gives_defaults():
    assert decode(_Sample, "null") == _Sample()


def test_malformed_json_raises():
    with pytest.raises(ValueError):
        decode(_Sample, "{not json")


def test_non_object_raises():
    with pytest.raises(ValueError):
        decode(_Sample, "[1, 2, 3]")


def test_failed_conversion_raises():
    with pytest.raises(ValueError, match="statusCode"):
        decode(_Sample, {"statusCode": "many"})