from zoomkit.exceptions.zoom_exceptions import (
    ZoomAPIError,
    ZoomConfigurationError,
    ZoomKitError,
    ZoomNotImplementedError,
    ZoomValidationError,
)

__all__ = [
    "ZoomAPIError",
    "ZoomConfigurationError",
    "ZoomKitError",
    "ZoomNotImplementedError",
    "ZoomValidationError",
]
