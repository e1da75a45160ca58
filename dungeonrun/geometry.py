"""Rectangles, alpha masks and collision tests between sprites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _edges(self) -> tuple[float, float, float, float]:
        x1, x2 = sorted((self.left, self.left + self.width))
        y1, y2 = sorted((self.top, self.top + self.height))
        return x1, x2, y1, y2

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area, or None when the rectangles do not overlap."""
        l1, r1, t1, b1 = self._edges()
        l2, r2, t2, b2 = other._edges()
        left, right = max(l1, l2), min(r1, r2)
        top, bottom = max(t1, t2), min(b1, b2)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        return self.intersection(other) is not None

    def contains(self, x: float, y: float) -> bool:
        """Left and top edges are inside, right and bottom edges are not."""
        left, right, top, bottom = self._edges()
        return left <= x < right and top <= y < bottom


class AlphaMask:
    """Per-pixel alpha values of a texture, stored row by row."""

    def __init__(self, width: int, height: int, alphas: Iterable[int]) -> None:
        data = bytes(alphas)
        if width < 0 or height < 0 or len(data) != width * height:
            raise ValueError(
                f"alpha mask of {width}x{height} needs {width * height} values, got {len(data)}"
            )
        self.width = width
        self.height = height
        self._alphas = data

    @classmethod
    def filled(cls, width: int, height: int, alpha: int = 255) -> AlphaMask:
        return cls(width, height, bytes([alpha]) * (width * height))

    def alpha_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} mask")
        return self._alphas[y * self.width + x]


def bounding_box_test(first: Rect, second: Rect) -> bool:
    return first.intersects(second)


def _to_local(bounds: Rect, mask: AlphaMask, x: int, y: int) -> tuple[int, int] | None:
    if bounds.width == 0 or bounds.height == 0:
        return None
    local_x = (x - bounds.left) * mask.width / bounds.width
    local_y = (y - bounds.top) * mask.height / bounds.height
    if 0 <= local_x < mask.width and 0 <= local_y < mask.height:
        return int(local_x), int(local_y)
    return None


def pixel_perfect_test(
    first_bounds: Rect,
    first_mask: AlphaMask,
    second_bounds: Rect,
    second_mask: AlphaMask,
    alpha_threshold: int = 128,
) -> bool:
    """True when some pixel is more opaque than the threshold in both sprites."""
    if not bounding_box_test(first_bounds, second_bounds):
        return False
    left = int(max(first_bounds.left, second_bounds.left))
    top = int(max(first_bounds.top, second_bounds.top))
    width = int(min(first_bounds.right, second_bounds.right) - left)
    height = int(min(first_bounds.bottom, second_bounds.bottom) - top)

    for y in range(top, top + height):
        for x in range(left, left + width):
            first = _to_local(first_bounds, first_mask, x, y)
            second = _to_local(second_bounds, second_mask, x, y)
            if first is None or second is None:
                continue
            if (
                first_mask.alpha_at(*first) > alpha_threshold
                and second_mask.alpha_at(*second) > alpha_threshold
            ):
                return True
    return False