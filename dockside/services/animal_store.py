"""
In-memory animal and visit store.

Every read and write runs under one lock, so a single store can be
shared by concurrently served HTTP requests.
"""

from __future__ import annotations

import threading

from dockside.models.animal import Animal, AnimalUpdate, Visit
from dockside.utils.logger import get_logger

logger = get_logger(__name__)


class AnimalStore:
    """Owned list of animals and their visits."""

    def __init__(self, animals: list[Animal] | None = None, visits: list[Visit] | None = None):
        self._lock = threading.Lock()
        self._animals: list[Animal] = list(animals or [])
        self._visits: list[Visit] = list(visits or [])

    def _find_animal(self, animal_id: int) -> int | None:
        for i, animal in enumerate(self._animals):
            if animal.id == animal_id:
                return i
        return None

    # -- animals ------------------------------------------------------------

    def list_animals(self) -> list[Animal]:
        with self._lock:
            return list(self._animals)

    def get_animal(self, animal_id: int) -> Animal | None:
        with self._lock:
            i = self._find_animal(animal_id)
            return None if i is None else self._animals[i]

    def add_animal(self, animal: Animal) -> Animal:
        """
        Append an animal.

        Raises:
            ValueError: an animal with the same ID exists
        """
        with self._lock:
            if self._find_animal(animal.id) is not None:
                raise ValueError(f"Animal {animal.id} already exists")
            self._animals.append(animal)
        logger.info("Animal %d (%s) added", animal.id, animal.name)
        return animal

    def update_animal(self, animal_id: int, update: AnimalUpdate) -> Animal | None:
        """Replace the editable fields; returns None if the animal is unknown."""
        with self._lock:
            i = self._find_animal(animal_id)
            if i is None:
                return None
            updated = self._animals[i].model_copy(update=update.model_dump())
            self._animals[i] = updated
        logger.info("Animal %d updated", animal_id)
        return updated

    def delete_animal(self, animal_id: int) -> Animal | None:
        """Remove and return the animal, or None if it is unknown."""
        with self._lock:
            i = self._find_animal(animal_id)
            if i is None:
                return None
            removed = self._animals.pop(i)
        logger.info("Animal %d deleted", animal_id)
        return removed

    # -- visits -------------------------------------------------------------

    def list_visits(self) -> list[Visit]:
        with self._lock:
            return list(self._visits)

    def visits_for_animal(self, animal_id: int) -> list[Visit]:
        with self._lock:
            return [v for v in self._visits if v.animal_id == animal_id]

    def add_visit(self, visit: Visit) -> Visit:
        """
        Append a visit.

        Raises:
            ValueError: a visit with the same ID exists
        """
        with self._lock:
            if any(v.id == visit.id for v in self._visits):
                raise ValueError(f"Visit {visit.id} already exists")
            self._visits.append(visit)
        logger.info("Visit %d added for animal %d", visit.id, visit.animal_id)
        return visit

    @property
    def counts(self) -> dict:
        with self._lock:
            return {"animals": len(self._animals), "visits": len(self._visits)}
