from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

from ..logging_config import get_logger

logger = get_logger(__name__)


class Renderer(Protocol):
    """
    One-way output channel for page fragments.

    Implementations ignore container ids they do not know about, which lets
    one render function serve page layouts that only define some containers.
    """

    def set_content(self, container_id: str, html: str) -> None:
        """Replace the content of a container with an HTML fragment."""
        ...


class MemoryRenderer(Renderer):
    """Collects fragments in a dict; used by tests and exports."""

    def __init__(self, containers: Optional[Iterable[str]] = None) -> None:
        self.containers = set(containers) if containers is not None else None
        self.contents: Dict[str, str] = {}
        self.calls: List[Tuple[str, str]] = []

    def set_content(self, container_id: str, html: str) -> None:
        if self.containers is not None and container_id not in self.containers:
            logger.debug(f"No container '{container_id}' on this page; skipped")
            return
        self.calls.append((container_id, html))
        self.contents[container_id] = html


class StreamlitRenderer(Renderer):
    """Writes fragments into Streamlit placeholders (`st.empty()`).

    `wrappers` maps a container id to markup with a `{content}` slot, e.g. a
    table shell around the rows written into a tbody container.
    """

    def __init__(self, placeholders: Mapping[str, Any], wrappers: Optional[Mapping[str, str]] = None) -> None:
        self.placeholders = dict(placeholders)
        self.wrappers = dict(wrappers or {})

    def set_content(self, container_id: str, html: str) -> None:
        placeholder = self.placeholders.get(container_id)
        if placeholder is None:
            logger.debug(f"No container '{container_id}' on this page; skipped")
            return
        wrapper = self.wrappers.get(container_id, "{content}")
        placeholder.markdown(wrapper.replace("{content}", html), unsafe_allow_html=True)
