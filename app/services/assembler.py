"""
Paged resource assembler for the Paged Resources Service.

This module turns a page of domain elements into a paged resource:
converted content, page metadata and navigation links.
"""

from typing import Any, Callable, List, Optional

from app.core.logging import get_logger
from app.core.pagination import PageNumberTranslator
from app.lib.url_builder import validate_base_uri
from app.models.errors import IllegalArgumentError
from app.models.page import Page, PageDescriptor
from app.models.resources import EmbeddedWrapper, Link, PagedResource, PageMetadata
from app.services.links import LinkOptions, LinkSetComputer

logger = get_logger(__name__)

ElementConverter = Callable[[Any], Any]
PageFactory = Callable[[List[Any], PageMetadata], PagedResource]


def _identity(element: Any) -> Any:
    return element


class PagedResourceAssembler:
    """
    Assembles paged resources with navigation links.

    The assembler is configured once and then used for any number of pages.
    Configuration is not locked; change it before handing the assembler to
    concurrent callers.

    Args:
        options: Link generation options
        request_url: URL of the current request, the link base when no
            base URI is configured
        page_factory: Builds the resource wrapping converted content and
            metadata; defaults to PagedResource.of
    """

    def __init__(
        self,
        options: Optional[LinkOptions] = None,
        request_url: Optional[str] = None,
        page_factory: Optional[PageFactory] = None
    ):
        self.options = options.model_copy() if options is not None else LinkOptions()
        self.request_url = request_url
        self.page_factory = page_factory or PagedResource.of

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_force_first_and_last_rels(self, force: bool) -> None:
        """Always add ``first`` and ``last`` links, even for a single page."""
        self.options = self.options.model_copy(update={"force_first_and_last_rels": force})

    def set_one_indexed_parameters(self, one_indexed: bool) -> None:
        self.options = self.options.model_copy(update={"one_indexed_parameters": one_indexed})

    def set_base_uri(self, base_uri: Optional[str]) -> None:
        """
        Use a fixed base URI instead of the request URL.

        Raises:
            InvalidBaseUriError: If the URI is not absolute; the previous
                base URI stays in effect
        """
        if base_uri is not None:
            validate_base_uri(base_uri)
        self.options = self.options.model_copy(update={"base_uri": base_uri})

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def assemble(
        self,
        page: Page,
        converter: Optional[ElementConverter] = None,
        link: Optional[Link] = None,
        page_factory: Optional[PageFactory] = None
    ) -> PagedResource:
        """
        Convert a page into a paged resource.

        Args:
            page: Page of domain elements
            converter: Function converting one element; identity when omitted
            link: Explicit base link replacing the request or configured base
            page_factory: Overrides the assembler's page factory for this call

        Returns:
            Paged resource with converted content in page order

        Raises:
            InvalidBaseUriError: If no absolute base URI can be resolved
        """
        converter = converter or _identity
        content = [converter(element) for element in page.content]
        return self._create(content, page, link, page_factory)

    def assemble_empty(
        self,
        page: Page,
        element_type: Optional[type],
        link: Optional[Link] = None
    ) -> PagedResource:
        """
        Build a paged resource for an empty page whose element type is known.

        The single content entry is an EmbeddedWrapper carrying the element
        type, so the rendered collection still declares its type.

        Raises:
            IllegalArgumentError: If the page has content or no element type is given
        """
        if page.content:
            raise IllegalArgumentError(
                "Page must not have any content.",
                reason="The empty-page constructor was given a page with content."
            )
        if element_type is None:
            raise IllegalArgumentError(
                "Element type must not be None.",
                reason="The element type of an empty page is required."
            )
        content = [EmbeddedWrapper(rel_target_type=element_type)]
        return self._create(content, page, link, None)

    def _create(
        self,
        content: List[Any],
        page: PageDescriptor,
        link: Optional[Link],
        page_factory: Optional[PageFactory]
    ) -> PagedResource:
        # Compute links first so an unusable base fails before any factory runs
        links = LinkSetComputer(self.options, self.request_url).compute(page, link)

        factory = page_factory or self.page_factory
        resource = factory(content, self._metadata(page))
        resource.add(*links.values())

        logger.debug(
            "Assembled paged resource",
            page_index=page.page_index,
            elements=len(content),
            resource_type=type(resource).__name__
        )
        return resource

    def _metadata(self, page: PageDescriptor) -> PageMetadata:
        translator = PageNumberTranslator(self.options.one_indexed_parameters)
        return PageMetadata(
            size=page.page_size,
            number=translator.to_external(page.page_index),
            total_elements=page.total_elements,
            total_pages=page.total_pages
        )
