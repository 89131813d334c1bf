"""Page slicing and the page-number window shown beside it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T] = field(default_factory=tuple)
    total: int = 0
    page: int = 1
    page_size: int = 20
    total_pages: int = 1
    start_index: int = 0
    end_index: int = 0


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slice *items* for *page*, clamping the page into ``[1, total_pages]``.

    The returned ``page`` is the clamped value; callers write it back into
    their query state.
    """

    total = len(items)
    size = max(1, int(page_size))
    total_pages = max(1, math.ceil(total / size))
    current = clamp(int(page), 1, total_pages)
    start = (current - 1) * size
    end = min(start + size, total)
    return Page(
        items=tuple(items[start:end]),
        total=total,
        page=current,
        page_size=size,
        total_pages=total_pages,
        start_index=start,
        end_index=end,
    )


def page_window(total_pages: int, current: int, radius: int = 2) -> List[Optional[int]]:
    """Page numbers to display, with ``None`` marking a gap.

    Always includes the first and last page plus every page within
    *radius* of *current*.
    """

    if total_pages <= 1:
        return []
    pages = {1, total_pages}
    for number in range(current - radius, current + radius + 1):
        if 1 <= number <= total_pages:
            pages.add(number)
    ordered = sorted(pages)
    window: List[Optional[int]] = []
    for index, number in enumerate(ordered):
        window.append(number)
        if index + 1 < len(ordered) and ordered[index + 1] - number > 1:
            window.append(None)
    return window
