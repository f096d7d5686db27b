import pytest

from assignment1.key_validation import validate_keys

PERSON = {"name": "Alice", "age": 25, "email": "alice@example.com"}

def test_none_value_counts_as_present():
    assert validate_keys({"name": None}, ["name"]) is True

def test_empty_key_list_is_true():
    assert validate_keys(PERSON, []) is True
    assert validate_keys({}, []) is True

def test_missing_on_empty_record():
    assert validate_keys({}, ["name"]) is False

def test_prefixes_of_valid_keys_stay_valid():
    keys = ["name", "age", "email"]
    assert validate_keys(PERSON, keys)
    for k in range(len(keys) + 1):
        assert validate_keys(PERSON, keys[:k])

def test_order_does_not_matter():
    assert validate_keys(PERSON, ["email", "name"]) == validate_keys(PERSON, ["name", "email"])

def test_values_are_not_checked():
    assert validate_keys({"a": 0, "b": "", "c": False}, ["a", "b", "c"]) is True

def test_short_circuits_on_first_missing():
    seen = []

    class Recording(dict):
        def __contains__(self, key):
            seen.append(key)
            return super().__contains__(key)

    assert validate_keys(Recording(PERSON), ["address", "name"]) is False
    assert seen == ["address"]

def test_non_container_record_fails_naturally():
    with pytest.raises(TypeError):
        validate_keys(42, ["name"])  # type: ignore[arg-type]
