from .errors import ResourceLoadError
from .interface import DataSource
from .loader import load_datasets

__all__ = ["DataSource", "ResourceLoadError", "load_datasets"]
