"""
Person service for the Paged Resources Service.

This module provides business logic for person operations and
coordinates between the repository and API endpoints.
"""

from functools import lru_cache

from app.core.logging import get_logger
from app.core.pagination import PaginationParams
from app.models.dto import Person
from app.models.errors import NotFoundError
from app.models.page import Page
from app.repositories.person import PersonRepository

logger = get_logger(__name__)


class PersonService:
    """Service for person business logic."""

    def __init__(self, repository: PersonRepository):
        """Initialize service with its repository."""
        self.repository = repository

    def get_people(self, pagination: PaginationParams) -> Page:
        """
        Get a page of people.

        Args:
            pagination: Resolved pagination parameters

        Returns:
            Page of Person objects
        """
        logger.debug(
            "Getting people",
            page=pagination.page,
            size=pagination.size,
            offset=pagination.offset
        )
        page = self.repository.find_page(pagination.page, pagination.size)
        logger.info(
            "Retrieved people",
            count=page.number_of_elements,
            total=page.total_elements
        )
        return page

    def get_person(self, person_id: str) -> Person:
        """
        Get a single person.

        Raises:
            NotFoundError: If no person has the given id
        """
        person = self.repository.find_by_id(person_id)
        if person is None:
            logger.info("Person not found", person_id=person_id)
            raise NotFoundError("Person")
        return person


@lru_cache()
def get_person_repository() -> PersonRepository:
    """Get the shared person repository."""
    return PersonRepository()
