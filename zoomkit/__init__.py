"""Async client for the Zoom REST API."""
from zoomkit.sources.client.zoom.zoom import (
    BROAD_POLICY,
    STRICT_POLICY,
    ResponsePolicy,
    ZoomClient,
    ZoomJWTConfig,
    ZoomResponse,
)
from zoomkit.sources.external.zoom.zoom import ZoomDataSource

__version__ = "0.1.0"

__all__ = [
    "BROAD_POLICY",
    "STRICT_POLICY",
    "ResponsePolicy",
    "ZoomClient",
    "ZoomDataSource",
    "ZoomJWTConfig",
    "ZoomResponse",
]
