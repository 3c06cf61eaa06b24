"""
Navigation link computation for the Paged Resources Service.

This module decides which of the page navigation relations apply to a page
and computes the URI of each one.
"""

from typing import Dict, Optional

from pydantic import BaseModel

from app.core.logging import get_logger
from app.core.pagination import PageNumberTranslator
from app.lib.url_builder import UriPageTemplateBuilder, validate_base_uri
from app.models.page import PageDescriptor
from app.models.resources import Link, LinkRelation

logger = get_logger(__name__)


class LinkOptions(BaseModel):
    """Link generation options shared by all calls of an assembler."""

    one_indexed_parameters: bool = False
    base_uri: Optional[str] = None
    force_first_and_last_rels: bool = False
    page_parameter: str = "page"
    size_parameter: str = "size"


class LinkSetComputer:
    """Computes the ``first``/``prev``/``self``/``next``/``last`` links of a page."""

    def __init__(self, options: LinkOptions, request_url: Optional[str] = None):
        self.options = options
        self.request_url = request_url

    def _builder(self) -> UriPageTemplateBuilder:
        # Built per call so configuration changes apply to the next computation
        return UriPageTemplateBuilder(
            PageNumberTranslator(self.options.one_indexed_parameters),
            base_uri=self.options.base_uri,
            request_url=self.request_url,
            page_parameter=self.options.page_parameter,
            size_parameter=self.options.size_parameter,
        )

    def compute(self, page: PageDescriptor, link: Optional[Link] = None) -> Dict[str, Link]:
        """
        Compute the link set of a page.

        Args:
            page: Position and size of the page
            link: Optional explicit link; its href becomes the base of every
                relation and the link itself, with query template
                expressions expanded and re-keyed to ``self``, becomes the
                self link

        Returns:
            Links keyed by relation, ordered first, prev, self, next, last

        Raises:
            InvalidBaseUriError: If no absolute base URI can be resolved, or
                the base carries template syntax other than query expressions
        """
        builder = self._builder()
        href = link.href if link is not None else None
        size = page.page_size
        if href is not None:
            validate_base_uri(href)

        def page_link(index: int, rel: str) -> Link:
            return Link(href=builder.build(index, size, href), rel=rel)

        total_pages = max(page.total_pages, 1)
        navigable = total_pages > 1 or self.options.force_first_and_last_rels

        links: Dict[str, Link] = {}
        if navigable:
            links[LinkRelation.FIRST] = page_link(0, LinkRelation.FIRST)
        if page.has_previous:
            links[LinkRelation.PREV] = page_link(page.page_index - 1, LinkRelation.PREV)
        if link is not None:
            links[LinkRelation.SELF] = link.expand().with_self_rel()
        else:
            links[LinkRelation.SELF] = page_link(page.page_index, LinkRelation.SELF)
        if page.has_next:
            links[LinkRelation.NEXT] = page_link(page.page_index + 1, LinkRelation.NEXT)
        if navigable:
            links[LinkRelation.LAST] = page_link(max(total_pages - 1, 0), LinkRelation.LAST)

        logger.debug(
            "Computed pagination links",
            page_index=page.page_index,
            page_size=size,
            total_pages=total_pages,
            rels=list(links)
        )
        return links
