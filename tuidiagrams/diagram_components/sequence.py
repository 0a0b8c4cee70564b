import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from ..errors import ConfigurationError
from .canvas import Canvas
from .core import BoxChars, MessageType, coerce_enum, resolve_box_chars
from .text import display_width, pad_center

logger = logging.getLogger(__name__)


@dataclass
class Actor:
    id: str
    name: str


@dataclass
class Message:
    source: str
    target: str
    label: str
    type: MessageType = MessageType.SYNC

    @property
    def is_self(self) -> bool:
        return self.source == self.target


Segment = Tuple[int, str, int, int]
Cell = Tuple[int, str]


class SequenceDiagram:

    def __init__(
        self,
        *,
        actor_width: int = 12,
        spacing: int = 6,
        box_style: Optional[Union[str, BoxChars]] = None,
    ):
        for name, value, minimum in (("actor_width", actor_width, 3), ("spacing", spacing, 0)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be an integer.")
            if value < minimum:
                raise ConfigurationError(f"{name} must be at least {minimum}.")

        self.actor_width = actor_width
        self.spacing = spacing
        self.chars = resolve_box_chars(box_style)
        self.actors: List[Actor] = []
        self.messages: List[Message] = []

    def add_actor(self, actor_id: str, name: Optional[str] = None) -> "SequenceDiagram":
        self.actors.append(Actor(actor_id, actor_id if name is None else name))
        return self

    def add_message(
        self,
        source: str,
        target: str,
        label: str,
        message_type: Union[str, MessageType] = MessageType.SYNC,
    ) -> "SequenceDiagram":
        self.messages.append(
            Message(source, target, label, coerce_enum(MessageType, message_type, "message type"))
        )
        return self

    def _column_x(self, index: int) -> int:
        return index * (self.actor_width + self.spacing)

    def _center(self, index: int) -> int:
        return self._column_x(index) + self.actor_width // 2

    def _segment(self, message: Message, actor_index: Dict[str, int]) -> Optional[Segment]:
        if message.source not in actor_index or message.target not in actor_index:
            logger.debug(
                "Message %s -> %s references an unknown actor", message.source, message.target
            )
            return None

        source = actor_index[message.source]
        target = actor_index[message.target]
        if source == target:
            text = f"{self.chars.vertical}{self.chars.arrow_right}[{message.label}]"
            return self._center(source), text, source, source

        lo, hi = min(source, target), max(source, target)
        span = (hi - lo) * (self.actor_width + self.spacing) - self.spacing
        rule_length = max(span - display_width(message.label) - 2, 0)
        glyph = self.chars.horizontal if message.type == MessageType.SYNC else self.chars.dashed
        rule = glyph * (rule_length // 2)

        body = message.label
        if rule_length > 0:
            body = f"{rule} {message.label} {rule}"
        if target < source:
            text = self.chars.arrow_left + body
        else:
            text = body + self.chars.arrow_right
        return self._center(lo), text, lo, hi

    def _row_cells(self, segment: Optional[Segment]) -> List[Cell]:
        """Placements for one message row: the message text plus idle lifelines."""
        if segment is None:
            return [(self._center(index), self.chars.vertical) for index in range(len(self.actors))]

        start, text, lo, hi = segment
        cells = [(self._center(index), self.chars.vertical) for index in range(lo)]
        cells.append((start, text))
        cursor = start + display_width(text)
        for index in range(hi + 1, len(self.actors)):
            x = self._center(index)
            if x < cursor:
                # pushed one space past a wide message
                x = cursor + 1
            cells.append((x, self.chars.vertical))
            cursor = x + 1
        return cells

    def _draw_lifelines(self, canvas: Canvas, row: int) -> None:
        for index in range(len(self.actors)):
            canvas.set(self._center(index), row, self.chars.vertical)

    def _draw_box_edges(self, canvas: Canvas, row: int, left: str, right: str) -> None:
        edge = left + self.chars.horizontal * (self.actor_width - 2) + right
        for index in range(len(self.actors)):
            canvas.write(self._column_x(index), row, edge)

    def render(self) -> str:
        if not self.actors:
            return ""

        actor_index = {actor.id: index for index, actor in enumerate(self.actors)}
        rows = [self._row_cells(self._segment(message, actor_index)) for message in self.messages]

        width = self._column_x(len(self.actors) - 1) + self.actor_width
        for cells in rows:
            for x, text in cells:
                width = max(width, x + display_width(text))
        height = 2 * len(self.messages) + 4
        canvas = Canvas(width, height)

        for index, actor in enumerate(self.actors):
            canvas.write(self._column_x(index), 0, pad_center(actor.name, self.actor_width))
        self._draw_box_edges(canvas, 1, self.chars.top_left, self.chars.top_right)

        row = 2
        for cells in rows:
            self._draw_lifelines(canvas, row)
            row += 1
            for x, text in cells:
                canvas.write(x, row, text)
            row += 1

        self._draw_lifelines(canvas, row)
        self._draw_box_edges(canvas, row + 1, self.chars.bottom_left, self.chars.bottom_right)
        return canvas.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SequenceDiagram(actors={len(self.actors)}, messages={len(self.messages)})"
