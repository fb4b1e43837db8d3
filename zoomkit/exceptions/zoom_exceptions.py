from typing import Optional


class ZoomKitError(Exception):
    """Base exception for Zoom client errors"""

    def __init__(self, message: str, status_code: Optional[int] = None, details: dict = None) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ZoomValidationError(ZoomKitError, ValueError):
    """Raised when endpoint arguments are rejected before a request is built"""

    def __init__(self, message: str, parameter: str = None, details: dict = None) -> None:
        super().__init__(message, None, details)
        self.parameter = parameter


class ZoomAPIError(ZoomKitError):
    """Raised when a failed ZoomResponse is unwrapped"""



class ZoomConfigurationError(ZoomKitError):
    """Raised when Zoom credentials are missing or invalid"""



class ZoomNotImplementedError(ZoomKitError):
    """Raised for Zoom endpoints that are deprecated upstream"""

    def __init__(
        self,
        message: str = "Not implemented",
        endpoint: str = None,
        details: dict = None,
    ) -> None:
        super().__init__(message, None, details)
        self.endpoint = endpoint
