"""Public package API for syntax-quoter."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("syntax-quoter")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

from .config import QuoterConfig
from .models import QuoteReport, QuoteRequest
from .quoting import ApiCall, Quoter, QuoterError, decode_call, encode_call
from .runner import build_report, quote_source, rebuild_source

__all__ = [
    "__version__",
    "ApiCall",
    "QuoteReport",
    "QuoteRequest",
    "Quoter",
    "QuoterConfig",
    "QuoterError",
    "build_report",
    "decode_call",
    "encode_call",
    "quote_source",
    "rebuild_source",
]
