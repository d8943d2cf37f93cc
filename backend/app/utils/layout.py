# backend/app/utils/layout.py
from typing import Literal, Tuple

Direction = Literal["horizontal", "vertical"]


class PanelResizer:
    """
    Pointer-drag arithmetic for a panel sized as a percentage of its container.

    A drag runs from start() to stop(); each move() maps the pointer position
    inside the container to a new size, clamped to [min_size, max_size].
    """

    def __init__(
        self,
        default_size: float,
        min_size: float = 10,
        max_size: float = 90,
        direction: Direction = "horizontal"
    ):
        if direction not in ("horizontal", "vertical"):
            raise ValueError(f"Unknown direction: {direction}")
        if not min_size <= default_size <= max_size:
            raise ValueError(
                f"default_size {default_size} must lie within [{min_size}, {max_size}]"
            )
        self.size = float(default_size)
        self.min_size = float(min_size)
        self.max_size = float(max_size)
        self.direction = direction
        self.is_resizing = False

    @property
    def cursor(self) -> str:
        if not self.is_resizing:
            return "default"
        return "col-resize" if self.direction == "horizontal" else "row-resize"

    def start(self) -> None:
        self.is_resizing = True

    def stop(self) -> None:
        self.is_resizing = False

    def clamp(self, size: float) -> float:
        return max(self.min_size, min(self.max_size, size))

    def move(self, pointer: float, container_start: float, container_length: float) -> float:
        """
        Update the size from a pointer coordinate (clientX for horizontal,
        clientY for vertical) and the container's offset and extent.
        """
        if not self.is_resizing or container_length <= 0:
            return self.size
        self.size = self.clamp((pointer - container_start) / container_length * 100)
        return self.size

    def css_size(self) -> Tuple[str, str]:
        prop = "width" if self.direction == "horizontal" else "height"
        return prop, f"{self.size}%"
