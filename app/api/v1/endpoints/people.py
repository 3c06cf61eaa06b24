"""
People API routes for the Paged Resources Service.

This module provides the paged people listing, rendered as HAL with
navigation links in both the body and the ``Link`` header.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.api.v1.deps import (
    get_app_settings,
    get_paged_resource_assembler,
    get_pagination_params,
    get_person_service
)
from app.core.config import Settings
from app.core.logging import get_logger
from app.core.pagination import PaginationParams, build_link_header
from app.lib.url_builder import validate_base_uri
from app.models.dto import Person, PersonResource
from app.models.errors import ErrorsResponse
from app.models.resources import Link
from app.services.assembler import PagedResourceAssembler
from app.services.person import PersonService

logger = get_logger(__name__)

router = APIRouter(prefix="/people", tags=["people"])


class HALJSONResponse(JSONResponse):
    media_type = "application/hal+json"


def _person_href(request: Request, person_id: str, base_uri: Optional[str]) -> str:
    """Person URI under the configured base URI, or the routed URI of this app."""
    if base_uri is None:
        return str(request.url_for("get_person", person_id=person_id))
    base = validate_base_uri(base_uri)
    return str(base.replace(path=f"{base.path.rstrip('/')}/{person_id}", query=""))


def _person_converter(request: Request, base_uri: Optional[str] = None):
    def to_resource(person: Person) -> PersonResource:
        resource = PersonResource(id=person.id, name=person.name)
        resource.add(Link(href=_person_href(request, person.id, base_uri)))
        return resource
    return to_resource


# ============================================================================
# People Listing
# ============================================================================

@router.get(
    "",
    response_class=HALJSONResponse,
    summary="List people",
    description="Get a paginated list of people with first/prev/self/next/last links",
    responses={400: {"model": ErrorsResponse}}
)
def list_people(
    request: Request,
    response: Response,
    pagination: PaginationParams = Depends(get_pagination_params),
    service: PersonService = Depends(get_person_service),
    assembler: PagedResourceAssembler = Depends(get_paged_resource_assembler),
    settings: Settings = Depends(get_app_settings)
) -> Dict[str, Any]:
    """List people with pagination."""
    logger.info(
        "List people request",
        page=pagination.number,
        size=pagination.size,
        path=request.url.path
    )

    page = service.get_people(pagination)

    if page.has_content:
        resource = assembler.assemble(page, _person_converter(request, settings.pagination.base_uri))
    else:
        resource = assembler.assemble_empty(page, PersonResource)

    link_header = build_link_header(resource.links)
    if link_header:
        response.headers["Link"] = link_header

    return resource.to_hal(collection_rel="people")


@router.get(
    "/{person_id}",
    response_class=HALJSONResponse,
    summary="Get person",
    responses={404: {"model": ErrorsResponse}}
)
def get_person(
    person_id: str,
    request: Request,
    service: PersonService = Depends(get_person_service),
    settings: Settings = Depends(get_app_settings)
) -> Dict[str, Any]:
    """Get a single person by id."""
    person = service.get_person(person_id)
    return _person_converter(request, settings.pagination.base_uri)(person).to_hal()
