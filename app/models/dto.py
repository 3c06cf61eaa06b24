"""
Data transfer objects for the Paged Resources Service.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.resources import Resource


class Person(BaseModel):
    """Person as stored in the repository."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: Optional[str] = None


class PersonResource(Resource):
    """Person representation returned by the API."""

    id: str
    name: str
