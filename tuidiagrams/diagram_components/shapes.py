from typing import Optional

from .core import BoxChars, Shape
from .node import Node
from .text import display_width

_DEFAULT_CHARS = BoxChars()


def render_box(label: str, chars: Optional[BoxChars] = None) -> str:
    chars = chars or _DEFAULT_CHARS
    return _framed(
        label,
        chars,
        (chars.top_left, chars.top_right, chars.bottom_left, chars.bottom_right),
    )


def render_rounded(label: str, chars: Optional[BoxChars] = None) -> str:
    chars = chars or _DEFAULT_CHARS
    return _framed(
        label,
        chars,
        (
            chars.rounded_top_left,
            chars.rounded_top_right,
            chars.rounded_bottom_left,
            chars.rounded_bottom_right,
        ),
    )


def _framed(label: str, chars: BoxChars, corners) -> str:
    top_left, top_right, bottom_left, bottom_right = corners
    width = display_width(label) + 4
    rule = chars.horizontal * (width - 2)
    return "\n".join(
        [
            f"{top_left}{rule}{top_right}",
            f"{chars.vertical} {label} {chars.vertical}",
            f"{bottom_left}{rule}{bottom_right}",
        ]
    )


def render_diamond(label: str, chars: Optional[BoxChars] = None) -> str:
    chars = chars or _DEFAULT_CHARS
    width = display_width(label) + 4
    apex = " " * (width // 2) + chars.diamond
    return "\n".join([apex, f"< {label} >", apex])


def render_circle(label: str, chars: Optional[BoxChars] = None) -> str:
    return f"( {label} )"


_RENDERERS = {
    Shape.BOX: render_box,
    Shape.ROUNDED: render_rounded,
    Shape.DIAMOND: render_diamond,
    Shape.CIRCLE: render_circle,
}

_INLINE_BRACKETS = {
    Shape.BOX: ("[", "]"),
    Shape.ROUNDED: ("(", ")"),
    Shape.DIAMOND: ("<", ">"),
    Shape.CIRCLE: ("((", "))"),
}


def render_node(node: Node, chars: Optional[BoxChars] = None) -> str:
    renderer = _RENDERERS.get(node.shape, render_box)
    return renderer(node.label, chars)


def render_node_inline(node: Node) -> str:
    opener, closer = _INLINE_BRACKETS.get(node.shape, ("[", "]"))
    return f"{opener}{node.label}{closer}"
