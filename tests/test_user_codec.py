import pytest

from core.errors import InvalidGeneratedData
from core.user_codec import (
    check_generated_user,
    decode_generated_user,
    new_user_candidate,
    normalize_generated_text,
    parse_generated_json,
)


def test_new_user_candidate_keeps_storage_field_order():
    candidate = new_user_candidate("Ada", "ada@example.com", "London", "123")
    assert list(candidate) == ["name", "email", "address", "phone"]
    assert candidate["email"] == "ada@example.com"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('{"a": 1}', '{"a": 1}'),
        ('  \n{"a": 1}\n  ', '{"a": 1}'),
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ('   ```json{"a": 1}```   ', '{"a": 1}'),
        # Only a lowercase "json" fence is recognised.
        ('```JSON\n{"a": 1}\n```', '```JSON\n{"a": 1}'),
        # A fence that is not at the start is left alone.
        ('here you go ```json\n{"a": 1}\n```', 'here you go ```json\n{"a": 1}'),
        # A plain opening fence is only stripped at the end.
        ('```\n{"a": 1}\n```', '```\n{"a": 1}'),
    ],
)
def test_normalize_generated_text(raw, expected):
    assert normalize_generated_text(raw) == expected


def test_parse_generated_json_rejects_non_json():
    with pytest.raises(InvalidGeneratedData) as excinfo:
        parse_generated_json("not json")
    assert excinfo.value.stage == "parse"


def test_check_generated_user_requires_an_object():
    with pytest.raises(InvalidGeneratedData) as excinfo:
        check_generated_user(["Ada", "ada@example.com"])
    assert excinfo.value.stage == "shape"


def test_check_generated_user_tolerates_missing_fields(caplog):
    value = {"name": "Ada"}
    with caplog.at_level("WARNING"):
        assert check_generated_user(value) is value
    assert "email, address, phone" in caplog.text


def test_decode_generated_user_from_fenced_block():
    raw = '```json\n{"name":"A","email":"a@b.com","address":"X","phone":"1"}\n```'
    assert decode_generated_user(raw) == {
        "name": "A",
        "email": "a@b.com",
        "address": "X",
        "phone": "1",
    }


def test_decode_generated_user_rejects_scalar_json():
    with pytest.raises(InvalidGeneratedData):
        decode_generated_user("42")
