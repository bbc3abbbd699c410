"""
Canvas rendering for the game board using PIL (Pillow).

The engine only needs three primitives: clear the surface, draw the food
as a circle inscribed in its cell, and draw every snake segment as a
filled, bordered square with the head in its own color.
"""

import io
from typing import Iterable, Tuple

from PIL import Image, ImageDraw

from domain.constants import BOX_SIZE, CANVAS_SIZE


class ColorScheme:
    """Colors of the board, matching the embedded page's palette"""

    BACKGROUND = "#0d1117"
    SNAKE_HEAD = "#f04a64"
    SNAKE_BODY = "#ffaf3d"
    SEGMENT_BORDER = "#161b22"
    FOOD = "#39e75f"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class CanvasRenderer:
    """Draws the game onto a square in-memory canvas."""

    def __init__(self, canvas_size: int = CANVAS_SIZE, box_size: int = BOX_SIZE):
        self.canvas_size = canvas_size
        self.box_size = box_size
        self.image = Image.new('RGB', (canvas_size, canvas_size), hex_to_rgb(ColorScheme.BACKGROUND))
        self.draw = ImageDraw.Draw(self.image)

    def clear(self):
        self.draw.rectangle(
            [0, 0, self.canvas_size, self.canvas_size],
            fill=hex_to_rgb(ColorScheme.BACKGROUND)
        )

    def draw_food(self, cell: Tuple[int, int]):
        x, y = cell
        radius = self.box_size / 2.5
        cx = x + self.box_size / 2
        cy = y + self.box_size / 2
        self.draw.ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            fill=hex_to_rgb(ColorScheme.FOOD)
        )

    def draw_snake(self, positions: Iterable[Tuple[int, int]]):
        # Out-of-bounds segments (a head that just hit the wall) are clipped by PIL
        for index, (x, y) in enumerate(positions):
            color = ColorScheme.SNAKE_HEAD if index == 0 else ColorScheme.SNAKE_BODY
            self.draw.rectangle(
                [x, y, x + self.box_size - 1, y + self.box_size - 1],
                fill=hex_to_rgb(color),
                outline=hex_to_rgb(ColorScheme.SEGMENT_BORDER),
                width=1
            )

    def render_frame(self, positions: Iterable[Tuple[int, int]], food: Tuple[int, int]) -> Image.Image:
        """Draw a complete frame from scratch and return the image"""
        self.clear()
        self.draw_food(food)
        self.draw_snake(positions)
        return self.image

    def to_png(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, format='PNG')
        return buffer.getvalue()
