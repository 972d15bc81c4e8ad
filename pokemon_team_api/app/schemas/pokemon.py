"""
Pydantic schemas for Pokemon records.

A Pokemon has a server‑assigned integer ``id``, a ``name``, a free‑form
``poke_type`` label and a ``level``.  Clients never send the ``id``; it
is chosen by the collection store on creation.

Ids and levels are unsigned 32‑bit integers.  They are validated
strictly: strings such as ``"5"``, floats such as ``5.0`` and booleans
are rejected instead of being coerced.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1

UInt32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]


class PokemonCreate(BaseModel):
    """Schema for adding a Pokemon to the team.  All fields are required."""

    name: str = Field(..., strict=True, description="Name of the Pokemon")
    poke_type: str = Field(..., strict=True, description="Type label, e.g. Electric or Grass")
    level: UInt32 = Field(..., description="Current level")


class PokemonUpdate(BaseModel):
    """Schema for updating an existing Pokemon.

    All fields are optional; only provided values will be updated.  A
    missing key and an explicit ``null`` both leave the stored value
    untouched, while an empty string is stored as given.
    """

    name: Optional[Annotated[str, Field(strict=True)]] = None
    poke_type: Optional[Annotated[str, Field(strict=True)]] = None
    level: Optional[UInt32] = None


class PokemonRead(BaseModel):
    """Schema for a stored Pokemon record."""

    id: UInt32
    name: str
    poke_type: str
    level: UInt32
