from __future__ import annotations
from typing import Any, Literal, Mapping, Sequence, TypedDict, TypeVar

K = TypeVar("K")

class Person(TypedDict):
    name: str
    age: int
    email: str

# Keys a static checker accepts for a Person; runtime checks take any key.
PersonKey = Literal["name", "age", "email"]

def validate_keys(record: Mapping[K, Any], keys: Sequence[K]) -> bool:
    """True iff every key in `keys` is present in `record`.

    Presence only: a key mapped to None still counts. An empty key list is True.
    """
    return all(key in record for key in keys)
