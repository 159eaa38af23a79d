"""
Animal registry records.

JSON field names are camelCase (furColor, animalId); snake_case
names are accepted on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnimalUpdate(_Record):
    """Editable animal fields (PUT body)."""
    name: str
    category: str
    weight: float = Field(ge=0)
    fur_color: str = ""


class Animal(AnimalUpdate):
    id: int


class Visit(_Record):
    """A visit of an animal."""
    id: int
    animal_id: int
    date: datetime
    description: str = ""
    price: float = Field(default=0.0, ge=0)
