from zoomkit.config.settings import (
    ZoomSettings,
    get_settings,
    reset_settings,
)

__all__ = ["ZoomSettings", "get_settings", "reset_settings"]
