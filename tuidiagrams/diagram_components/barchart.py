import math
from dataclasses import dataclass
from typing import List, Optional, Union

from ..errors import ConfigurationError
from .canvas import Canvas
from .core import BoxChars, Orientation, coerce_enum, resolve_box_chars
from .text import display_width, format_value, pad_center, pad_right

COLOR_RESET = "\x1b[0m"
VERTICAL_GAP = 2
MIN_VERTICAL_BAR_WIDTH = 3


@dataclass
class Bar:
    label: str
    value: float
    color: str = ""


class BarChart:

    def __init__(
        self,
        title: str = "",
        orientation: Union[str, Orientation] = Orientation.HORIZONTAL,
        *,
        width: int = 50,
        height: int = 10,
        show_values: bool = True,
        box_style: Optional[Union[str, BoxChars]] = None,
    ):
        self.title = title or ""
        self.orientation = coerce_enum(Orientation, orientation, "bar orientation")
        self.chars = resolve_box_chars(box_style)
        self.bars: List[Bar] = []
        self.set_width(width)
        self.set_height(height)
        self.set_show_values(show_values)

    def add_bar(self, label: str, value: float) -> "BarChart":
        return self.add_bar_with_color(label, value, "")

    def add_bar_with_color(self, label: str, value: float, color: str) -> "BarChart":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError("Bar value must be a number.")
        if not math.isfinite(value):
            raise ConfigurationError("Bar value must be finite.")
        self.bars.append(Bar(str(label), float(value), color or ""))
        return self

    def set_width(self, width: int) -> "BarChart":
        self.width = self._positive_int("width", width)
        return self

    def set_height(self, height: int) -> "BarChart":
        self.height = self._positive_int("height", height)
        return self

    def set_show_values(self, show: bool) -> "BarChart":
        self.show_values = bool(show)
        return self

    @staticmethod
    def _positive_int(name: str, value: int) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigurationError(f"{name} must be an integer.")
        if value < 1:
            raise ConfigurationError(f"{name} must be at least 1.")
        return value

    def render(self) -> str:
        if not self.bars:
            return ""
        if self.orientation == Orientation.HORIZONTAL:
            body = self._render_horizontal()
        else:
            body = self._render_vertical()
        return "\n".join(self._title_lines() + [body])

    def _title_lines(self) -> List[str]:
        if not self.title:
            return []
        return [self.title, "=" * display_width(self.title), ""]

    def _max_value(self) -> float:
        # scale never drops below zero
        return max(0.0, max(bar.value for bar in self.bars))

    def bar_length(self, value: float) -> int:
        """Number of block glyphs a horizontal bar of ``value`` gets."""
        max_value = self._max_value()
        if max_value <= 0 or value <= 0:
            return 0
        return int(math.floor(value / max_value * self.width))

    def _render_horizontal(self) -> str:
        label_width = max(display_width(bar.label) for bar in self.bars)
        lines: List[str] = []
        for bar in self.bars:
            blocks = self.chars.block * self.bar_length(bar.value)
            if bar.color:
                blocks = f"{bar.color}{blocks}{COLOR_RESET}"
            line = f"{pad_right(bar.label, label_width)} {self.chars.vertical} {blocks}"
            if self.show_values:
                line += f" {format_value(bar.value)}"
            lines.append(line)
        return "\n".join(lines)

    def _render_vertical(self) -> str:
        max_value = self._max_value()
        bar_width = max(self.width, MIN_VERTICAL_BAR_WIDTH)
        total_width = len(self.bars) * bar_width + (len(self.bars) - 1) * VERTICAL_GAP
        rows = self.height + 1
        canvas = Canvas(total_width, rows + (3 if self.show_values else 2))

        def column_x(index: int) -> int:
            return index * (bar_width + VERTICAL_GAP)

        for y, row in enumerate(range(self.height, -1, -1)):
            threshold = (row / self.height) * max_value
            for index, bar in enumerate(self.bars):
                if max_value <= 0 or bar.value < threshold:
                    continue
                x = column_x(index)
                canvas.write(x, y, self.chars.block * bar_width)
                if bar.color:
                    canvas.insert_markup(x, y, bar.color, position="prefix")
                    canvas.insert_markup(x + bar_width - 1, y, COLOR_RESET, position="suffix")

        canvas.write(0, rows, self.chars.horizontal * total_width)
        for index, bar in enumerate(self.bars):
            canvas.write(column_x(index), rows + 1, pad_center(bar.label, bar_width))
            if self.show_values:
                canvas.write(column_x(index), rows + 2, pad_center(format_value(bar.value), bar_width))

        return canvas.render(include_markup=True, trim=False)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"BarChart(title={self.title!r}, orientation={self.orientation.name}, bars={len(self.bars)})"
