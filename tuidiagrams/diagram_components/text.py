"""Display-width aware text helpers shared by the layouts."""

from wcwidth import wcwidth


def char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)


def truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    used = 0
    for index, char in enumerate(text):
        used += char_width(char)
        if used > width:
            return text[:index]
    return text


def pad_right(text: str, width: int) -> str:
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


def pad_center(text: str, width: int) -> str:
    """Center ``text`` in ``width`` columns, truncating when it does not fit."""
    if display_width(text) >= width:
        return truncate(text, width)
    missing = width - display_width(text)
    left = missing // 2
    return " " * left + text + " " * (missing - left)


def format_value(value: float) -> str:
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.1f}"
