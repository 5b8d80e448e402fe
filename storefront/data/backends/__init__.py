from .json_backend import JsonFileDataSource
from .http_backend import HttpJsonDataSource

__all__ = ["JsonFileDataSource", "HttpJsonDataSource"]
