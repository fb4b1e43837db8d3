from zoomkit.sources.external.zoom.zoom import ZoomDataSource

__all__ = ["ZoomDataSource"]
