"""Back and forward navigation history."""

from __future__ import annotations

import copy

from favoritos.collections import PageStack
from favoritos.models import Page


class HistoryManager:
    """Tracks the current page with back and forward stacks."""

    def __init__(self) -> None:
        self._back = PageStack()
        self._forward = PageStack()
        self._current = Page()
        self._has_current = False

    def visit(self, page: Page) -> None:
        """Go to ``page``; the forward history is discarded."""
        if self._has_current:
            self._back.push(self._current)
        self._current = copy.copy(page)
        self._has_current = True
        self._forward.clear()

    def go_back(self) -> None:
        """Step back one page; does nothing when there is none."""
        if self._back.is_empty():
            return
        self._forward.push(self._current)
        self._current = self._back.pop()

    def go_forward(self) -> None:
        """Step forward one page; does nothing when there is none."""
        if self._forward.is_empty():
            return
        self._back.push(self._current)
        self._current = self._forward.pop()

    def current(self) -> Page:
        """Return a copy of the current page (empty before any visit)."""
        return copy.copy(self._current)

    def can_go_back(self) -> bool:
        """Whether there is a page to go back to."""
        return not self._back.is_empty()

    def can_go_forward(self) -> bool:
        """Whether there is a page to go forward to."""
        return not self._forward.is_empty()