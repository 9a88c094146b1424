"""Jobs Proxy - Serve and store job listings through SheetDB."""

from .handler import handle
from .models import ErrorResponse, ProxyRequest, ProxyResponse
from .sheetdb_client import SheetDBClient, SheetDBError

__version__ = "0.1.0"

__all__ = [
    "ErrorResponse",
    "ProxyRequest",
    "ProxyResponse",
    "SheetDBClient",
    "SheetDBError",
    "handle",
]
