"""
FastAPI dependencies for the Paged Resources Service.

This module provides dependency injection for configuration, pagination
parameters, the paged resource assembler and services.
"""

from fastapi import Depends, Request

from app.core.config import Settings, get_settings
from app.core.pagination import PaginationParams, parse_pagination_params
from app.core.logging import get_logger
from app.models.errors import InvalidParametersError
from app.repositories.person import PersonRepository
from app.services.assembler import PagedResourceAssembler
from app.services.links import LinkOptions
from app.services.person import PersonService, get_person_repository

logger = get_logger(__name__)


# ============================================================================
# Core Dependencies
# ============================================================================

def get_app_settings() -> Settings:
    """Get application settings dependency."""
    return get_settings()


def get_person_service(
    repository: PersonRepository = Depends(get_person_repository)
) -> PersonService:
    """Get person service dependency."""
    return PersonService(repository)


# ============================================================================
# Pagination Dependencies
# ============================================================================

def get_pagination_params(
    request: Request,
    settings: Settings = Depends(get_app_settings)
) -> PaginationParams:
    """
    Get and validate pagination parameters.

    The parameter names come from configuration, so they are read from the
    query string directly rather than declared as query parameters.

    Raises:
        HTTPException: If pagination parameters are invalid
    """
    pagination = settings.pagination
    try:
        return parse_pagination_params(
            request.query_params.get(pagination.page_parameter),
            request.query_params.get(pagination.size_parameter),
            pagination
        )
    except InvalidParametersError as e:
        logger.warning(
            "Invalid pagination parameters",
            path=str(request.url.path),
            parameters=e.parameters
        )
        raise e.to_http_exception()


def get_paged_resource_assembler(
    request: Request,
    settings: Settings = Depends(get_app_settings)
) -> PagedResourceAssembler:
    """Get an assembler whose links default to the current request URL."""
    pagination = settings.pagination
    options = LinkOptions(
        one_indexed_parameters=pagination.one_indexed_parameters,
        base_uri=pagination.base_uri,
        force_first_and_last_rels=pagination.force_first_and_last_rels,
        page_parameter=pagination.page_parameter,
        size_parameter=pagination.size_parameter,
    )
    return PagedResourceAssembler(options, request_url=str(request.url))
