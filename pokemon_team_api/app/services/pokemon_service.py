"""
Service layer for the Pokemon team.

The team is kept in memory as an ordered list of ``PokemonRead``
records guarded by a single ``threading.Lock``.  Every operation, reads
included, holds the lock for its full duration, so no caller ever
observes a half‑applied change.  Nothing is persisted; the team starts
empty with the process and disappears with it.

New ids are the id of the *last* record in insertion order plus one,
or ``1`` for an empty team.  This is not a maximum over all ids ever
issued: after deleting the tail of the list an id can be handed out
again.

A plain ``threading.Lock`` cannot be poisoned, so the store tracks that
state itself.  If an exception escapes an operation while the lock is
held, the store is marked faulted and every later operation raises
``LockFault``.  The API layer does not catch it; the process has to
be restarted.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from pokemon_team_api.app.schemas.pokemon import PokemonCreate, PokemonRead, PokemonUpdate


logger = logging.getLogger(__name__)


class LockFault(RuntimeError):
    """Raised when the team lock is unusable after an earlier failure."""


class PokemonStore:
    """Ordered, lock‑protected collection of Pokemon records."""

    def __init__(self) -> None:
        self._team: List[PokemonRead] = []
        self._lock = threading.Lock()
        self._faulted = False

    @property
    def faulted(self) -> bool:
        return self._faulted

    @contextmanager
    def _locked(self) -> Iterator[List[PokemonRead]]:
        """Hold the lock and yield the underlying list.

        Raises ``LockFault`` if a previous holder failed.  Any exception
        raised by the caller while holding the lock faults the store.
        """
        with self._lock:
            if self._faulted:
                raise LockFault("Pokemon team lock is faulted; restart the service")
            try:
                yield self._team
            except Exception:
                self._faulted = True
                logger.critical("Operation failed while holding the team lock; store is now faulted", exc_info=True)
                raise

    def create(self, data: PokemonCreate) -> PokemonRead:
        """Append a new Pokemon and return a copy of the stored record."""
        with self._locked() as team:
            new_id = team[-1].id + 1 if team else 1
            pokemon = PokemonRead(id=new_id, name=data.name, poke_type=data.poke_type, level=data.level)
            team.append(pokemon)
            logger.info("Created Pokemon %s (%s)", new_id, data.name)
            return pokemon.model_copy()

    def list_all(self) -> List[PokemonRead]:
        """Return copies of all records in insertion order."""
        with self._locked() as team:
            return [pokemon.model_copy() for pokemon in team]

    def get(self, pokemon_id: int) -> Optional[PokemonRead]:
        """Return a copy of the record with ``pokemon_id`` or ``None``."""
        with self._locked() as team:
            pokemon = self._find(team, pokemon_id)
            if pokemon is None:
                logger.debug("Pokemon %s not found", pokemon_id)
                return None
            return pokemon.model_copy()

    def update(self, pokemon_id: int, data: PokemonUpdate) -> Optional[PokemonRead]:
        """Overwrite the fields present in ``data``.

        Returns the updated record, or ``None`` if no record has the
        given id (in which case nothing changes).
        """
        with self._locked() as team:
            pokemon = self._find(team, pokemon_id)
            if pokemon is None:
                logger.debug("Pokemon %s not found for update", pokemon_id)
                return None
            if data.name is not None:
                pokemon.name = data.name
            if data.poke_type is not None:
                pokemon.poke_type = data.poke_type
            if data.level is not None:
                pokemon.level = data.level
            logger.info("Updated Pokemon %s", pokemon_id)
            return pokemon.model_copy()

    def delete(self, pokemon_id: int) -> bool:
        """Remove every record with ``pokemon_id``.

        Returns ``True`` if the team shrank, ``False`` otherwise.
        """
        with self._locked() as team:
            original_len = len(team)
            team[:] = [pokemon for pokemon in team if pokemon.id != pokemon_id]
            deleted = len(team) < original_len
            if deleted:
                logger.info("Deleted Pokemon %s", pokemon_id)
            else:
                logger.debug("Pokemon %s not found for deletion", pokemon_id)
            return deleted

    @staticmethod
    def _find(team: List[PokemonRead], pokemon_id: int) -> Optional[PokemonRead]:
        for pokemon in team:
            if pokemon.id == pokemon_id:
                return pokemon
        return None


class PokemonService:
    """Service class for managing the process‑wide Pokemon team."""

    store: PokemonStore = PokemonStore()

    @classmethod
    def create_pokemon(cls, data: PokemonCreate) -> PokemonRead:
        return cls.store.create(data)

    @classmethod
    def list_pokemon(cls) -> List[PokemonRead]:
        return cls.store.list_all()

    @classmethod
    def get_pokemon(cls, pokemon_id: int) -> Optional[PokemonRead]:
        return cls.store.get(pokemon_id)

    @classmethod
    def update_pokemon(cls, pokemon_id: int, data: PokemonUpdate) -> Optional[PokemonRead]:
        return cls.store.update(pokemon_id, data)

    @classmethod
    def delete_pokemon(cls, pokemon_id: int) -> bool:
        return cls.store.delete(pokemon_id)
