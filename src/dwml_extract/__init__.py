"""
DWML Forecast Extraction

This package reads Digital Weather Markup Language forecasts into views that
resolve locations and time layouts for each forecast parameter.
"""

__version__ = "0.1.0"
__description__ = "Structured forecast extraction from DWML documents"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "DWMLDocument":
        from .dwml import DWMLDocument
        return DWMLDocument
    if name == "DWMLExtractApp":
        from .main import DWMLExtractApp
        return DWMLExtractApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DWMLDocument",
    "DWMLExtractApp",
]
