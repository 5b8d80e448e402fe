from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List

from ...config import get_config
from ...logging_config import get_logger
from ..errors import ResourceLoadError
from ..interface import DataSource
from .base import ensure_records

logger = get_logger(__name__)


class JsonFileDataSource(DataSource):
    """
    Local JSON-file implementation.
    - Reads `<data_dir>/<name>.json` on every call (no caching).
    - File reads run in a worker thread so several datasets load concurrently.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        if data_dir is None:
            config = get_config()
            data_dir = config.data_dir

        self.data_dir = Path(data_dir)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            if repo_root:
                self.data_dir = repo_root / self.data_dir
            else:
                # Fallback to current directory
                self.data_dir = current / self.data_dir

    def describe(self) -> str:
        return str(self.data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    async def load(self, name: str) -> List[Dict[str, Any]]:
        path = self.path_for(name)
        logger.debug(f"Reading dataset {name} from {path}")
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            raise ResourceLoadError(name, str(path), str(e)) from e
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResourceLoadError(name, str(path), f"invalid JSON: {e}") from e
        return ensure_records(payload, name, str(path))
