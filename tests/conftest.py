"""
Pytest configuration for the Pokemon Team API.

Provides fixtures for:
- A fresh, empty team for every test
- A ``TestClient`` bound to the application
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from pokemon_team_api.app.main import app
from pokemon_team_api.app.schemas.pokemon import PokemonCreate
from pokemon_team_api.app.services.pokemon_service import PokemonService, PokemonStore


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> PokemonStore:
    """
    Replace the process-wide team with an empty one for the test.
    """
    fresh = PokemonStore()
    monkeypatch.setattr(PokemonService, "store", fresh)
    return fresh


@pytest.fixture
def client(store: PokemonStore) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def pikachu() -> PokemonCreate:
    return PokemonCreate(name="Pikachu", poke_type="Electric", level=5)


@pytest.fixture
def bulbasaur() -> PokemonCreate:
    return PokemonCreate(name="Bulbasaur", poke_type="Grass", level=3)
