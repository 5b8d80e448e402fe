from __future__ import annotations

from typing import Any, Dict, List, Protocol


class DataSource(Protocol):
    """
    Backend-agnostic contract for fetching the dashboard datasets.

    - `name` is a resource name such as "orders"; backends map it to
      `<name>.json` under their root.
    - Implementations return the raw JSON array and MUST NOT cache: every
      page view works on freshly loaded copies.
    - Failures are raised as ResourceLoadError.
    """

    def describe(self) -> str:
        """Human-readable location of the datasets, used in errors and logs."""
        ...

    async def load(self, name: str) -> List[Dict[str, Any]]:
        """Fetch and decode one dataset."""
        ...
