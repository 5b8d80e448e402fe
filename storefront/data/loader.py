from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ValidationError

from ..logging_config import get_logger
from .errors import ResourceLoadError
from .interface import DataSource
from .models import DATASET_MODELS

logger = get_logger(__name__)


def parse_records(name: str, rows: List[Dict[str, Any]], source: str = "<memory>") -> List[BaseModel]:
    """Validate raw JSON objects into the record model registered for `name`."""
    try:
        model = DATASET_MODELS[name]
    except KeyError:
        raise ValueError(f"Unknown dataset: {name}") from None
    try:
        return [model.model_validate(row) for row in rows]
    except ValidationError as e:
        raise ResourceLoadError(name, source, f"{e.error_count()} invalid record field(s)") from e


async def load_datasets(source: DataSource, *names: str) -> Sequence[List[BaseModel]]:
    """Load several datasets concurrently and return them in the requested order.

    All-or-nothing: the first failure propagates as ResourceLoadError and no
    partial result is returned.
    """
    for name in names:
        if name not in DATASET_MODELS:
            raise ValueError(f"Unknown dataset: {name}")

    raw = await asyncio.gather(*(source.load(name) for name in names))
    datasets = [parse_records(name, rows, source.describe()) for name, rows in zip(names, raw)]
    logger.debug(
        "Loaded " + ", ".join(f"{name}={len(rows)}" for name, rows in zip(names, datasets))
    )
    return datasets
