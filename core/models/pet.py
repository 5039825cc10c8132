"""Pet listing domain models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    """Pet gender."""

    MALE = "Male"
    FEMALE = "Female"


class PetSort(str, Enum):
    """Browse ordering."""

    NEWEST = "newest"
    OLDEST = "oldest"
    NAME = "name"
    BREED = "breed"


class PetDraft(BaseModel):
    """Unvalidated listing form payload. Every field may be blank."""

    name: str = ""
    breed: str = ""
    age: str = ""
    gender: str = ""
    health_info: str = ""
    description: str = ""
    image: str = ""
    seller_contact: str = ""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class Pet(BaseModel):
    """Published listing as stored."""

    id: str
    name: str
    breed: str
    age: str
    gender: Gender
    health_info: str
    description: str
    image: str  # data URI or path
    seller_contact: str
    owner_id: str
    created_at: datetime

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PetQuery(BaseModel):
    """Browse filters. Blank values match everything."""

    search: str = ""
    breed: str = ""
    gender: Gender | None = None
    sort: PetSort = PetSort.NEWEST
