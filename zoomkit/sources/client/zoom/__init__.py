"""Zoom client module."""
from zoomkit.sources.client.zoom.zoom import (
    BROAD_POLICY,
    STRICT_POLICY,
    ResponsePolicy,
    ZoomClient,
    ZoomCredentials,
    ZoomJWTConfig,
    ZoomResponse,
    ZoomRESTClientViaJWT,
)

__all__ = [
    "BROAD_POLICY",
    "STRICT_POLICY",
    "ResponsePolicy",
    "ZoomClient",
    "ZoomCredentials",
    "ZoomJWTConfig",
    "ZoomResponse",
    "ZoomRESTClientViaJWT",
]
