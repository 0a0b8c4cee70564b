from typing import Dict, List, Tuple

from ..errors import LayoutOverflowError
from .text import char_width


class Canvas:

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = [[" " for _ in range(width)] for _ in range(height)]
        self.cell_widths = [[1 for _ in range(width)] for _ in range(height)]
        self.markup: Dict[Tuple[int, int], Dict[str, List[str]]] = {}

    def _clear_markup(self, x: int, y: int) -> None:
        self.markup.pop((x, y), None)

    def _clear_glyph_at(self, x: int, y: int) -> None:
        width = self.cell_widths[y][x]
        if width == 0:
            base_x = x - 1
            while base_x >= 0 and self.cell_widths[y][base_x] == 0:
                base_x -= 1
            if base_x < 0:
                return
            width = self.cell_widths[y][base_x]
            x = base_x
        for i in range(max(width, 1)):
            xi = x + i
            if 0 <= xi < self.width:
                self.grid[y][xi] = " "
                self.cell_widths[y][xi] = 1

    def set(self, x: int, y: int, char: str, width: int = 1) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise LayoutOverflowError(
                f"Diagram content exceeds canvas bounds at ({x}, {y})."
            )
        if width < 1:
            width = 1
        if x + width > self.width:
            raise LayoutOverflowError(
                f"Diagram content exceeds canvas bounds at ({x + width - 1}, {y})."
            )

        for i in range(width):
            self._clear_glyph_at(x + i, y)
            self._clear_markup(x + i, y)

        self.grid[y][x] = char
        self.cell_widths[y][x] = width
        for i in range(1, width):
            self.grid[y][x + i] = " "
            self.cell_widths[y][x + i] = 0

    def get(self, x: int, y: int) -> str:
        if 0 <= y < self.height and 0 <= x < self.width:
            if self.cell_widths[y][x] == 0:
                return " "
            return self.grid[y][x]
        return " "

    def write(self, x: int, y: int, text: str) -> int:
        """Write ``text`` starting at column ``x``; returns the column after it."""
        for char in text:
            width = char_width(char)
            self.set(x, y, char, width)
            x += width
        return x

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup:
            return
        if position not in {"prefix", "suffix"}:
            position = "prefix"
        cell = self.markup.setdefault((x, y), {"prefix": [], "suffix": []})
        cell[position].append(markup)

    def render(self, include_markup: bool = False, trim: bool = True) -> str:
        lines: List[str] = []
        for y in range(self.height):
            parts: List[str] = []
            for x in range(self.width):
                if self.cell_widths[y][x] == 0:
                    continue
                markup_cell = self.markup.get((x, y)) if include_markup else None
                if markup_cell:
                    parts.extend(markup_cell.get("prefix", []))
                parts.append(self.grid[y][x])
                if markup_cell:
                    parts.extend(markup_cell.get("suffix", []))
            line = "".join(parts)
            lines.append(line.rstrip(" ") if trim else line)
        return "\n".join(lines)
