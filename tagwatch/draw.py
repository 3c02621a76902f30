"""Off-screen drawing surfaces that record what is drawn onto them."""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

BACKGROUND_COLOR = 0x444444

DISPLAY_WIDTH = 240
DISPLAY_HEIGHT = 240


class Datum(Enum):
    """Reference point of a drawn item relative to its coordinate."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"


@dataclass(frozen=True)
class Coordinate:
    """A point on the canvas."""

    x: int
    y: int


class DrawKind(Enum):
    """What a recorded drawing operation does."""

    FILL = "fill"
    PNG = "png"
    TEXT = "text"


@dataclass(frozen=True)
class DrawCommand:
    """A single recorded drawing operation."""

    kind: DrawKind
    target: str = ""
    coordinate: Coordinate = Coordinate(0, 0)
    datum: Datum = Datum.TOP_LEFT
    color: Optional[int] = None
    font_size: Optional[int] = None


def _char_width(char: str, font_size: int) -> int:
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return font_size
    return font_size // 2


class Canvas:
    """A sprite of fixed size holding the operations drawn onto it, in order."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.commands: List[DrawCommand] = []

    def fill(self, color: int) -> None:
        """Paint the whole canvas with ``color``, covering everything drawn before."""
        if not 0 <= color <= 0xFFFFFF:
            raise ValueError(f"color must be a 24-bit RGB value, got {color!r}")
        self.commands = [DrawCommand(DrawKind.FILL, color=color)]

    def draw_png(self, path: str, coordinate: Coordinate, datum: Datum) -> None:
        """Draw the PNG image stored at ``path``."""
        if not path:
            raise ValueError("image path must not be empty")
        self.commands.append(DrawCommand(DrawKind.PNG, path, coordinate, datum))

    def draw_string(self, text: str, x: int, y: int, color: int, font_size: int, datum: Datum) -> None:
        """Draw ``text`` at (x, y) in the given color and font size."""
        if font_size <= 0:
            raise ValueError(f"font size must be positive, got {font_size}")
        self.commands.append(
            DrawCommand(DrawKind.TEXT, text, Coordinate(x, y), datum, color, font_size)
        )

    def text_width(self, text: str, font_size: int) -> int:
        """Width in pixels of ``text``; wide characters take a full em, others half."""
        if font_size <= 0:
            raise ValueError(f"font size must be positive, got {font_size}")
        return sum(_char_width(char, font_size) for char in text)


class Display:
    """The physical screen; each presented canvas becomes a frame."""

    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"display size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.frames: List[Tuple[DrawCommand, ...]] = []

    def new_canvas(self) -> Canvas:
        """A blank canvas the size of the display."""
        return Canvas(self.width, self.height)

    def present(self, canvas: Canvas) -> None:
        """Push ``canvas`` to the screen."""
        if (canvas.width, canvas.height) != (self.width, self.height):
            raise ValueError("canvas size does not match the display")
        self.frames.append(tuple(canvas.commands))