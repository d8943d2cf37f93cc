from .layout import PanelResizer

__all__ = ["PanelResizer"]
