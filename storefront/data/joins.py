from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Mapping, Optional, Tuple, TypeVar

from .indexing import field_value

P = TypeVar("P")
R = TypeVar("R")


def lookup(index: Mapping[Hashable, R], key: Any) -> Optional[R]:
    """Resolve a foreign key; unresolved keys give None, never an error."""
    if key is None:
        return None
    return index.get(key)


def join_one(records: Iterable[P], index: Mapping[Hashable, R], foreign_key: str) -> List[Tuple[P, Optional[R]]]:
    """Pair every record with its zero-or-one related record."""
    return [(record, lookup(index, field_value(record, foreign_key))) for record in records]


def find_first(records: Iterable[R], field: str, value: Any) -> Optional[R]:
    for record in records:
        if field_value(record, field) == value:
            return record
    return None


def filter_by(records: Iterable[R], field: str, value: Any) -> List[R]:
    return [record for record in records if field_value(record, field) == value]
