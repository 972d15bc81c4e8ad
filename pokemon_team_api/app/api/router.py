"""
Top‑level API router.

Aggregates the resource routers.  The Pokemon router declares its own
``/pokemon`` paths internally so that the collection is served at
``/pokemon`` without a trailing slash; do not add a prefix here.
"""

from fastapi import APIRouter

from .endpoints import pokemon, root

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(pokemon.router, tags=["pokemon"])
