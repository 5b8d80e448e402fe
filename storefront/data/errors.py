from __future__ import annotations

from typing import Optional


class ResourceLoadError(RuntimeError):
    """A dataset could not be fetched or parsed.

    Raised by the data loader and left to propagate: a page whose datasets
    fail to load renders nothing.
    """

    def __init__(self, resource: str, source: str, reason: Optional[str] = None) -> None:
        self.resource = resource
        self.source = source
        self.reason = reason
        message = f"Failed to load dataset '{resource}' from {source}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
