"""Layout geometry helpers for the terminal user interface."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 2**16 - 1


def _to_u16(value: int) -> int:
    return value if 0 <= value <= _U16_MAX else 0


def calc_scroll_top(current_top: int, height_in_lines: int, selection: int) -> int:
    """Scroll position (line) needed to bring `selection` into view."""
    if current_top + height_in_lines <= selection:
        return max(selection - height_in_lines, 0) + 1
    if current_top > selection:
        return selection
    return current_top


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return min(self.x + self.width, _U16_MAX)

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return min(self.y + self.height, _U16_MAX)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


def _inner(rect: Rect, horizontal: int, vertical: int) -> Rect:
    if rect.width < 2 * horizontal or rect.height < 2 * vertical:
        return Rect(0, 0, 0, 0)
    return Rect(
        rect.x + horizontal,
        rect.y + vertical,
        rect.width - 2 * horizontal,
        rect.height - 2 * vertical,
    )


def rect_inside(minimum: Size, maximum: Size, rect: Rect) -> Rect:
    """Grow `rect` to at least `minimum` and shrink it to at most `maximum`,
    keeping it centred where it grows."""
    new_width = min(max(rect.width, minimum.width), maximum.width)
    new_height = min(max(rect.height, minimum.height), maximum.height)
    diff_width = max(new_width - rect.width, 0)
    diff_height = max(new_height - rect.height, 0)
    return Rect(
        max(rect.x - diff_width // 2, 0),
        max(rect.y - diff_height // 2, 0),
        new_width,
        new_height,
    )


def centered_rect_absolute(width: int, height: int, rect: Rect) -> Rect:
    """A rectangle of fixed size centred in `rect`, clipped to its size."""
    return Rect(
        max(rect.width - width, 0) // 2,
        max(rect.height - height, 0) // 2,
        min(width, rect.width),
        min(height, rect.height),
    )


def scrollbar_position(area: Rect, lines: int, pos: int) -> tuple[int, int] | None:
    """Cell (x, y) of the scrollbar's position marker inside `area`.

    The bar runs down the rightmost column, leaving out the first and last
    row. None means no scrollbar is drawn: the area is too narrow or low, or
    every line already fits.
    """
    lines = _to_u16(lines)
    pos = _to_u16(pos)

    right = max(area.right - 1, 0)
    if right <= area.left:
        return None

    inner = _inner(area, 0, 1)
    if inner.height == 0 or inner.height >= lines:
        return None

    max_pos = max(lines - inner.height, 0)
    progress = min(pos / max_pos, 1.0)
    offset = max(int(inner.height * progress) - 1, 0)
    return right, inner.top + offset