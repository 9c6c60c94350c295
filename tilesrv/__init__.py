"""Configuration parsing, request handling and INSPIRE checks for a WMS/WMTS/TMS tile server."""

__version__ = "0.1.0"
__all__ = [
    "attribution",
    "contact",
    "inspire",
    "metadata",
    "request",
    "server_config",
    "services_config",
]