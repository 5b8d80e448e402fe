"""
Primary-key indexes and grouped aggregations over flat record sets.

Records may be pydantic models (fields read by attribute name) or plain
mappings such as raw JSON objects (fields read by key).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterable, Optional, TypeVar

import pandas as pd

from ..logging_config import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


def field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field)


def build_primary_index(records: Iterable[R], key_field: str) -> Dict[Hashable, R]:
    """Map each record's `key_field` value to the record.

    Duplicate keys: the last record wins. Duplicates point at inconsistent
    source data, so they are logged.
    """
    index: Dict[Hashable, R] = {}
    duplicates = 0
    for record in records:
        key = field_value(record, key_field)
        if key in index:
            duplicates += 1
        index[key] = record
    if duplicates:
        logger.warning(f"{duplicates} duplicate value(s) for key field '{key_field}'; last record kept")
    return index


def _group_key(value: Any) -> Any:
    # groupby(dropna=False) reports missing keys as NaN
    if not isinstance(value, (list, tuple, dict)) and pd.isna(value):
        return None
    return value


def aggregate(records: Iterable[Any], group_field: str, value_field: Optional[str] = None) -> Dict[Any, Any]:
    """Count records per `group_field` value, or sum `value_field` per group.

    The result preserves first-appearance order of the group keys.
    """
    rows = list(records)
    if not rows:
        return {}

    frame = pd.DataFrame({"group": pd.Series([field_value(r, group_field) for r in rows], dtype=object)})
    if value_field is None:
        result = frame.groupby("group", sort=False, dropna=False).size()
    else:
        frame["value"] = [field_value(r, value_field) for r in rows]
        result = frame.groupby("group", sort=False, dropna=False)["value"].sum()

    return {_group_key(k): v for k, v in zip(result.index.tolist(), result.tolist())}


def group_count(records: Iterable[Any], group_field: str) -> Dict[Any, int]:
    return aggregate(records, group_field)


def group_sum(records: Iterable[Any], group_field: str, value_field: str) -> Dict[Any, float]:
    return aggregate(records, group_field, value_field)
