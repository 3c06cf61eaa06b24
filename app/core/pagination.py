"""
Pagination utilities for the Paged Resources Service.

This module translates between internal zero-based page indices and the
page numbers exposed in query parameters, resolves the pagination
parameters of a request, and renders ``Link`` headers.
"""

import re
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from app.core.config import PaginationSettings
from app.core.logging import get_logger
from app.models.errors import create_pagination_error
from app.models.resources import Link

logger = get_logger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class PageNumberTranslator:
    """Converts zero-based page indices to external page numbers and back."""

    def __init__(self, one_indexed_parameters: bool = False):
        self.one_indexed_parameters = one_indexed_parameters

    @property
    def first_page_number(self) -> int:
        return 1 if self.one_indexed_parameters else 0

    def to_external(self, page_index: int) -> int:
        return page_index + self.first_page_number

    def to_internal(self, page_number: int) -> int:
        return page_number - self.first_page_number


class PaginationParams(BaseModel):
    """Pagination parameters resolved from a request.

    ``page`` is the zero-based page index regardless of how the request
    numbered it; ``number`` keeps the page number as the client sent it.
    """

    model_config = ConfigDict(frozen=True)

    page: int
    size: int
    number: int

    @property
    def offset(self) -> int:
        return self.page * self.size


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    # ASCII digits only
    if not INTEGER_PATTERN.fullmatch(value.strip()):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value.strip())


def parse_pagination_params(
    page: Optional[str],
    size: Optional[str],
    settings: PaginationSettings
) -> PaginationParams:
    """
    Resolve raw ``page``/``size`` query values into pagination parameters.

    Missing values fall back to the first page and the default page size.
    Sizes above the configured maximum are capped.

    Args:
        page: Raw page number as sent by the client, or None
        size: Raw page size as sent by the client, or None
        settings: Pagination settings

    Returns:
        Resolved PaginationParams

    Raises:
        InvalidParametersError: If a value is not an integer, the page
            precedes the first page, or the size is below 1
    """
    translator = PageNumberTranslator(settings.one_indexed_parameters)
    invalid_page = None
    invalid_size = None

    try:
        number = _parse_int(page)
    except ValueError:
        number, invalid_page = None, page
    try:
        page_size = _parse_int(size)
    except ValueError:
        page_size, invalid_size = None, size

    if number is not None and number < translator.first_page_number:
        invalid_page = page
    if page_size is not None and page_size < 1:
        invalid_size = size

    if invalid_page is not None or invalid_size is not None:
        raise create_pagination_error(
            invalid_page,
            invalid_size,
            page_parameter=settings.page_parameter,
            size_parameter=settings.size_parameter
        )

    if number is None:
        number = translator.first_page_number
    if page_size is None:
        page_size = settings.default_page_size
    if page_size > settings.max_page_size:
        logger.debug(
            "Limiting page size",
            requested=page_size,
            max_allowed=settings.max_page_size
        )
        page_size = settings.max_page_size

    return PaginationParams(
        page=translator.to_internal(number),
        size=page_size,
        number=number
    )


def build_link_header(links: Mapping[str, Link]) -> str:
    """
    Build an RFC 8288 ``Link`` header value from a link set.

    Examples:
        >>> build_link_header({"next": Link(href="http://x/?page=1&size=5", rel="next")})
        '<http://x/?page=1&size=5>; rel="next"'
    """
    return ", ".join(f'<{link.href}>; rel="{rel}"' for rel, link in links.items())
