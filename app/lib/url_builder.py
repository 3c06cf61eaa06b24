"""
URL builder utility for generating pagination links.

This module turns a base URI and a page position into a concrete URI
carrying literal ``page`` and ``size`` query parameters.
"""

from typing import Optional

from starlette.datastructures import URL

from app.core.pagination import PageNumberTranslator
from app.models.errors import InvalidBaseUriError
from app.models.resources import QUERY_TEMPLATE_VARIABLE


def validate_base_uri(uri: Optional[str]) -> URL:
    """
    Parse a base URI, rejecting anything that is not absolute.

    Query template expressions such as ``{?page,size}`` or ``{&sort}`` are
    dropped. Any other brace, including a path variable like
    ``/users/{id}``, cannot be expanded here and makes the URI invalid.

    Raises:
        InvalidBaseUriError: If the URI is missing, lacks a scheme or host,
            or still contains template syntax
    """
    if uri is None:
        raise InvalidBaseUriError(None)
    stripped = QUERY_TEMPLATE_VARIABLE.sub("", uri.strip())
    if "{" in stripped or "}" in stripped:
        raise InvalidBaseUriError(uri, f"Base URI '{uri}' contains unexpandable template syntax.")
    url = URL(stripped)
    if not url.scheme or not url.netloc:
        raise InvalidBaseUriError(uri)
    return url


class UriPageTemplateBuilder:
    """Builds fully expanded page URIs rooted at a base URI."""

    def __init__(
        self,
        translator: PageNumberTranslator,
        base_uri: Optional[str] = None,
        request_url: Optional[str] = None,
        page_parameter: str = "page",
        size_parameter: str = "size"
    ):
        """
        Args:
            translator: Page number translator for the rendered page numbers
            base_uri: Explicitly configured base URI
            request_url: URL of the current request, used when no base is configured
            page_parameter: Name of the page query parameter
            size_parameter: Name of the size query parameter
        """
        self.translator = translator
        self.base_uri = base_uri
        self.request_url = request_url
        self.page_parameter = page_parameter
        self.size_parameter = size_parameter

    def resolve_base(self, href: Optional[str] = None) -> URL:
        """Pick the base URI: an explicit href, then the configured base, then the request."""
        if href is not None:
            base = href
        elif self.base_uri is not None:
            base = self.base_uri
        else:
            base = self.request_url
        url = validate_base_uri(base)
        return url.remove_query_params([self.page_parameter, self.size_parameter])

    def build(self, page_index: int, page_size: int, href: Optional[str] = None) -> str:
        """
        Build the URI of a page.

        Existing query parameters are kept in order; the page and size
        parameters always come last.

        Examples:
            >>> builder = UriPageTemplateBuilder(PageNumberTranslator(), base_uri="http://foo:9090/people?q=a&page=7")
            >>> builder.build(2, 10)
            'http://foo:9090/people?q=a&page=2&size=10'
        """
        url = self.resolve_base(href).include_query_params(**{
            self.page_parameter: self.translator.to_external(page_index),
            self.size_parameter: page_size,
        })
        return str(url)
