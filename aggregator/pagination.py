"""Windowed page picker: first page, neighbours of the current page, last page."""

from __future__ import annotations

from typing import List, Union

from models import ELLIPSIS, PaginationWindow, total_pages

MAX_VISIBLE_PAGES = 5

__all__ = ["MAX_VISIBLE_PAGES", "pagination_window", "total_pages"]


def pagination_window(current_page: int, total_pages: int) -> PaginationWindow:
    """Return the page entries to show for *current_page* of *total_pages*.

    Up to five pages are listed in full. Beyond that the window is
    ``1 [… ] current-1 current current+1 [… ] last`` with the neighbours
    clamped to ``2..last-1``.
    """
    if total_pages < 0:
        raise ValueError(f"total_pages must be >= 0, got {total_pages}")
    if current_page < 1 or current_page > max(1, total_pages):
        raise ValueError(f"current_page {current_page} is outside 1..{total_pages}")

    entries: List[Union[int, str]] = []

    if total_pages <= MAX_VISIBLE_PAGES:
        entries.extend(range(1, total_pages + 1))
    else:
        entries.append(1)

        if current_page > 3:
            entries.append(ELLIPSIS)

        start = max(2, current_page - 1)
        end = min(current_page + 1, total_pages - 1)
        entries.extend(range(start, end + 1))

        if current_page < total_pages - 2:
            entries.append(ELLIPSIS)

        entries.append(total_pages)

    return PaginationWindow(
        entries=entries,
        current_page=current_page,
        total_pages=total_pages,
        has_previous=current_page != 1,
        has_next=current_page < total_pages,
    )
