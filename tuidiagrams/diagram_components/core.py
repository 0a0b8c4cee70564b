from dataclasses import dataclass
from enum import Enum
from typing import Dict, Protocol, Union, runtime_checkable

from ..errors import ConfigurationError


class Direction(Enum):

    TOP_TO_BOTTOM = "TD"
    LEFT_TO_RIGHT = "LR"


class Shape(Enum):

    BOX = "box"
    ROUNDED = "rounded"
    DIAMOND = "diamond"
    CIRCLE = "circle"


class MessageType(Enum):

    SYNC = "sync"
    ASYNC = "async"
    RETURN = "return"


class Orientation(Enum):

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


_DIRECTION_ALIASES: Dict[str, Direction] = {
    "td": Direction.TOP_TO_BOTTOM,
    "tb": Direction.TOP_TO_BOTTOM,
    "top_to_bottom": Direction.TOP_TO_BOTTOM,
    "lr": Direction.LEFT_TO_RIGHT,
    "rl": Direction.LEFT_TO_RIGHT,
    "left_to_right": Direction.LEFT_TO_RIGHT,
}


def coerce_direction(value: Union[str, Direction]) -> Direction:
    if isinstance(value, Direction):
        return value
    if isinstance(value, str) and value.strip().lower() in _DIRECTION_ALIASES:
        return _DIRECTION_ALIASES[value.strip().lower()]
    raise ConfigurationError(f"Unknown flowchart direction: {value!r}")


def coerce_enum(enum_cls, value, name: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if key in {member.value.lower(), member.name.lower()}:
                return member
    raise ConfigurationError(f"Unknown {name}: {value!r}")


@runtime_checkable
class Diagram(Protocol):
    """Anything that renders itself as a block of terminal text."""

    def render(self) -> str:
        ...


@dataclass
class BoxChars:

    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"

    rounded_top_left: str = "╭"
    rounded_top_right: str = "╮"
    rounded_bottom_left: str = "╰"
    rounded_bottom_right: str = "╯"

    horizontal: str = "─"
    vertical: str = "│"
    dashed: str = "-"

    arrow_down: str = "↓"
    arrow_right: str = "→"
    arrow_left: str = "←"
    arrow_up: str = "↑"

    diamond: str = "◆"
    block: str = "█"

    @classmethod
    def for_style(cls, style: str) -> "BoxChars":
        key = style.lower().strip()
        if key in {"square", "line", "box", "unicode"}:
            return cls()
        if key in {"rounded", "round", "modern"}:
            return cls(
                top_left="╭",
                top_right="╮",
                bottom_left="╰",
                bottom_right="╯",
            )
        if key in {"ascii", "plain"}:
            return cls(
                top_left="+",
                top_right="+",
                bottom_left="+",
                bottom_right="+",
                rounded_top_left="/",
                rounded_top_right="\\",
                rounded_bottom_left="\\",
                rounded_bottom_right="/",
                horizontal="-",
                vertical="|",
                dashed=".",
                arrow_down="v",
                arrow_right=">",
                arrow_left="<",
                arrow_up="^",
                diamond="*",
                block="#",
            )
        raise ValueError(f"Unknown box style: {style}")


def resolve_box_chars(box_style: Union[None, str, BoxChars]) -> BoxChars:
    if isinstance(box_style, BoxChars):
        return box_style
    style_key = box_style or "square"
    if not isinstance(style_key, str):
        raise ConfigurationError("box_style must be a string or BoxChars instance.")
    try:
        return BoxChars.for_style(style_key)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
