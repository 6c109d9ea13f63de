import pytest

from podio_sdk.core.domain.dynamic import DynamicStructure
from podio_sdk.core.errors import DeserializationError, MissingFieldError
from podio_sdk.core.services.unwrap import extract_field


def test_extract_field_returns_value():
    assert extract_field({"profile_id": 42, "other": "x"}, "profile_id") == 42


def test_extract_field_missing_raises_with_field_name():
    with pytest.raises(MissingFieldError) as exc_info:
        extract_field({"other": "x"}, "profile_id")

    assert exc_info.value.field_name == "profile_id"


def test_extract_field_from_dynamic_structure_with_type():
    raw = DynamicStructure.from_json('{"total": "7"}')

    assert extract_field(raw, "total", int) == 7


def test_extract_field_type_mismatch_raises_deserialization_error():
    with pytest.raises(DeserializationError):
        extract_field({"total": "many"}, "total", int)


def test_extract_field_on_non_mapping_is_missing():
    with pytest.raises(MissingFieldError):
        extract_field(DynamicStructure([1, 2]), "total")


def test_dynamic_structure_safe_lookups():
    raw = DynamicStructure.from_json('{"profile": {"name": "Ann"}, "tags": [1, 2]}')

    assert raw.is_mapping
    assert not raw.is_list
    assert raw.child("tags").is_list
    assert raw.get("missing") is None
    assert "profile" in raw
    assert raw.child("profile").get("name") == "Ann"
    assert raw.child("nope") is None
    assert [item.value for item in raw.child("tags").items()] == [1, 2]
    assert DynamicStructure("text").get("anything") is None


def test_dynamic_structure_empty_and_invalid_bodies():
    assert DynamicStructure.from_json("").value is None

    with pytest.raises(DeserializationError) as exc_info:
        DynamicStructure.from_json("BEGIN:VCARD")
    assert exc_info.value.raw_body == "BEGIN:VCARD"
