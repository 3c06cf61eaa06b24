"""
Person repository for the Paged Resources Service.

This module provides read access to the people collection, which is
loaded from ``app/config_data/people.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Sequence

from app.core.logging import get_logger
from app.models.dto import Person
from app.models.page import Page

logger = get_logger(__name__)

# From app/repositories/person.py, go up 1 level to reach app/, then config_data/
DATA_PATH = Path(__file__).resolve().parents[1] / "config_data" / "people.json"


class PersonRepository:
    """In-memory repository for people."""

    def __init__(self, people: Optional[Sequence[Person]] = None):
        """Initialize repository with the given people, or the bundled data set."""
        self._people: List[Person] = list(people) if people is not None else self._load()

    @staticmethod
    def _load() -> List[Person]:
        with DATA_PATH.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("Loaded people data set", path=str(DATA_PATH), count=len(data))
        return [Person(**item) for item in data]

    def count(self) -> int:
        return len(self._people)

    def find_page(self, page_index: int, page_size: int) -> Page:
        """
        Get one page of people.

        Args:
            page_index: Zero-based page index
            page_size: Number of people per page

        Returns:
            Page holding the people at the requested position
        """
        offset = page_index * page_size
        content = self._people[offset:offset + page_size]
        return Page.of(
            content,
            page_index=page_index,
            page_size=page_size,
            total_elements=self.count()
        )

    def find_by_id(self, person_id: str) -> Optional[Person]:
        for person in self._people:
            if person.id == person_id:
                return person
        return None
