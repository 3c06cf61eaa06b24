"""
Page models for the Paged Resources Service.

A page is a bounded, ordered slice of a larger result set together with the
positional metadata needed to navigate the rest of it. Page indices are
always zero-based here; one-indexed page numbers only exist at the edges
(query parameters and rendered metadata).
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PageDescriptor(BaseModel):
    """Which page, of what size, out of how many elements."""

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=20, ge=0)
    total_elements: int = Field(default=0, ge=0)

    @property
    def total_pages(self) -> int:
        if self.page_size == 0:
            return 1
        return math.ceil(self.total_elements / self.page_size)

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        # An index past the last page has nothing after it
        return self.page_index + 1 < self.total_pages

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next


class Page(PageDescriptor):
    """A page descriptor carrying the page's elements."""

    content: Tuple[Any, ...] = ()

    @classmethod
    def of(
        cls,
        content: Iterable[Any],
        page_index: int = 0,
        page_size: int = 20,
        total_elements: int = 0
    ) -> Page:
        """
        Create a page, correcting the total when the content reveals it.

        When a page holds elements but its window reaches past the reported
        total, the total is taken from the content itself: a short last page
        tells exactly how many elements exist.

        Examples:
            >>> Page.of(["a"], page_index=1, page_size=1, total_elements=3).total_pages
            3
            >>> Page.of(["a"], page_index=2, page_size=5, total_elements=12).total_elements
            11
        """
        content = tuple(content)
        offset = page_index * page_size
        if content and offset + page_size > total_elements:
            total_elements = offset + len(content)
        return cls(
            content=content,
            page_index=page_index,
            page_size=page_size,
            total_elements=total_elements,
        )

    @classmethod
    def empty(cls, page_index: int = 0, page_size: int = 20) -> Page:
        """Create a page without elements and a total of zero."""
        return cls(page_index=page_index, page_size=page_size, total_elements=0)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)
