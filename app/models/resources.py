"""
Hypermedia resource models for the Paged Resources Service.

This module provides links, page metadata and the paged resource returned
by the assembler, plus their HAL-style rendering.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.errors import IllegalArgumentError

TEMPLATE_VARIABLE = re.compile(r"\{[^{}]*\}")
QUERY_TEMPLATE_VARIABLE = re.compile(r"\{[?&][^{}]*\}")


class LinkRelation:
    """Link relations used for page navigation."""
    SELF = "self"
    FIRST = "first"
    PREV = "prev"
    NEXT = "next"
    LAST = "last"


class Link(BaseModel):
    """A hyperlink with its relation and optional HAL attributes."""

    model_config = ConfigDict(frozen=True)

    href: str
    rel: str = LinkRelation.SELF
    title: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    hreflang: Optional[str] = None
    profile: Optional[str] = None

    @property
    def is_templated(self) -> bool:
        return bool(TEMPLATE_VARIABLE.search(self.href))

    def with_rel(self, rel: str) -> Link:
        """Return a copy of this link under a different relation."""
        return self.model_copy(update={"rel": rel})

    def with_self_rel(self) -> Link:
        return self.with_rel(LinkRelation.SELF)

    def expand(self) -> Link:
        """Return a copy of this link with any template variables removed."""
        if not self.is_templated:
            return self
        return self.model_copy(update={"href": TEMPLATE_VARIABLE.sub("", self.href)})

    def to_hal(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"rel"}, exclude_none=True)


class PageMetadata(BaseModel):
    """Size and position of a page; ``number`` is the externally visible page number."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    size: int
    number: int
    total_elements: int
    total_pages: int


def collection_rel_for(element_type: type) -> str:
    """
    Derive the relation name for a collection of the given type.

    Examples:
        >>> collection_rel_for(Link)
        'linkList'
    """
    name = element_type.__name__
    return f"{name[:1].lower()}{name[1:]}List"


class EmbeddedWrapper(BaseModel):
    """Placeholder content entry declaring the element type of an empty collection."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rel_target_type: Type[Any]

    @property
    def rel(self) -> str:
        return collection_rel_for(self.rel_target_type)


class Resource(BaseModel):
    """Base class for representations carrying links."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    links: Dict[str, Link] = Field(default_factory=dict, exclude=True)

    def add(self, *links: Link) -> None:
        """Add links, replacing any existing link with the same relation."""
        for link in links:
            self.links[link.rel] = link

    def has_link(self, rel: str) -> bool:
        return rel in self.links

    def get_link(self, rel: str) -> Optional[Link]:
        return self.links.get(rel)

    def get_required_link(self, rel: str) -> Link:
        link = self.links.get(rel)
        if link is None:
            raise IllegalArgumentError(
                f"No link with rel '{rel}' found.",
                reason=f"Available relations: {', '.join(self.links) or 'none'}"
            )
        return link

    def to_hal(self) -> Dict[str, Any]:
        """Render the resource's fields followed by its ``_links``."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        if self.links:
            data["_links"] = {rel: link.to_hal() for rel, link in self.links.items()}
        return data


class PagedResource(Resource):
    """A page of converted content with page metadata and navigation links."""

    content: List[Any] = Field(default_factory=list)
    metadata: PageMetadata

    @classmethod
    def of(cls, content: List[Any], metadata: PageMetadata) -> PagedResource:
        """Page factory; subclasses inherit it and build instances of themselves."""
        return cls(content=content, metadata=metadata)

    def to_hal(self, collection_rel: Optional[str] = None) -> Dict[str, Any]:
        """
        Render the page as a HAL document.

        Content is embedded under ``collection_rel``, or under a relation
        derived from the element type. Embedded-type placeholders render as
        empty collections, under their own relation unless one is given.
        """
        data: Dict[str, Any] = {}

        embedded: Dict[str, List[Any]] = {}
        for item in self.content:
            if isinstance(item, EmbeddedWrapper):
                embedded.setdefault(collection_rel or item.rel, [])
                continue
            rel = collection_rel or collection_rel_for(type(item))
            embedded.setdefault(rel, []).append(_render(item))
        if embedded:
            data["_embedded"] = embedded

        if self.links:
            data["_links"] = {rel: link.to_hal() for rel, link in self.links.items()}
        data["page"] = self.metadata.model_dump(by_alias=True)
        return data


def _render(item: Any) -> Any:
    if isinstance(item, Resource):
        return item.to_hal()
    if isinstance(item, BaseModel):
        return item.model_dump(by_alias=True, exclude_none=True)
    return item
