"""Upstream owner payload models (Petclinic API)."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawPetType(BaseModel):
    """Nested pet type object, e.g. ``{"id": 1, "name": "cat"}``."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    name: Optional[str] = None


class RawPet(BaseModel):
    """Pet as returned by the owners API. Visits are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    name: str
    birth_date: Optional[str] = Field(default=None, alias="birthDate")
    type: Optional[RawPetType] = None


class RawOwnerRecord(BaseModel):
    """Owner record in the upstream camelCase format."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    pets: Optional[List[RawPet]] = None


class ResponseShape(str, Enum):
    """Known layouts of an owners list response."""

    ARRAY = "array"
    HAL_OWNERS = "hal_owners"
    HAL_OWNER_LIST = "hal_owner_list"
    PAGINATED = "paginated"
    UNRECOGNIZED = "unrecognized"


class DetailShape(str, Enum):
    """Known layouts of a single-owner response."""

    BARE = "bare"
    HAL_EMBEDDED = "hal_embedded"
    ARRAY = "array"
    UNRECOGNIZED = "unrecognized"
