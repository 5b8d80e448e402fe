from __future__ import annotations

from typing import Literal, Optional

from ..config import get_config
from .backends import HttpJsonDataSource, JsonFileDataSource
from .interface import DataSource


def get_data_source(kind: Optional[Literal["file", "http"]] = None) -> DataSource:
    config = get_config()
    kind = kind or config.data_source
    if kind == "file":
        # Reads from configured JSON folder
        return JsonFileDataSource(data_dir=config.data_dir)
    if kind == "http":
        if not config.data_base_url:
            raise ValueError("DATA_BASE_URL must be set to use the http data source")
        return HttpJsonDataSource(config.data_base_url, timeout=config.http_timeout)
    raise ValueError(f"Unknown data source kind: {kind}")
