"""
Pokemon endpoints.

CRUD routes over the in‑memory team.  Handlers are plain functions, so
FastAPI runs them in its worker thread pool; the service's lock
serializes access to the shared team.  Unknown ids are reported as
HTTP 404.  Malformed bodies never reach the service: FastAPI rejects
them with 422 during request validation.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Path, status

from pokemon_team_api.app.schemas.pokemon import U32_MAX, PokemonCreate, PokemonRead, PokemonUpdate
from pokemon_team_api.app.services.pokemon_service import PokemonService

router = APIRouter()

NOT_FOUND = "Pokemon not found"


@router.get("/pokemon", response_model=List[PokemonRead])
def list_pokemon() -> List[PokemonRead]:
    """Return the whole team in the order the Pokemon were added."""
    return PokemonService.list_pokemon()


@router.post("/pokemon", response_model=PokemonRead, status_code=status.HTTP_201_CREATED)
def create_pokemon(pokemon_in: PokemonCreate) -> PokemonRead:
    """Add a Pokemon to the team; the response carries the assigned id."""
    return PokemonService.create_pokemon(pokemon_in)


@router.get("/pokemon/{pokemon_id}", response_model=PokemonRead)
def get_pokemon(pokemon_id: int = Path(..., ge=0, le=U32_MAX)) -> PokemonRead:
    """Retrieve a single Pokemon by ID.

    Returns HTTP 404 if no Pokemon has this ID.
    """
    pokemon = PokemonService.get_pokemon(pokemon_id)
    if pokemon is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return pokemon


@router.put("/pokemon/{pokemon_id}", response_model=PokemonRead)
def update_pokemon(pokemon_in: PokemonUpdate, pokemon_id: int = Path(..., ge=0, le=U32_MAX)) -> PokemonRead:
    """Update an existing Pokemon.

    Only the fields present in the body change, even though the route
    uses PUT.
    """
    pokemon = PokemonService.update_pokemon(pokemon_id, pokemon_in)
    if pokemon is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return pokemon


@router.delete("/pokemon/{pokemon_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pokemon(pokemon_id: int = Path(..., ge=0, le=U32_MAX)) -> None:
    """Remove a Pokemon from the team."""
    deleted = PokemonService.delete_pokemon(pokemon_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
