"""A minimal greeting service backed by an in-memory repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

_log = logging.getLogger(__name__)


@dataclass
class Greeter:
    """A greeting and, once saved, its id."""

    hello: str
    id: Optional[int] = None


class InMemoryGreeterRepo:
    """Stores greeters in a dictionary keyed by id."""

    def __init__(self) -> None:
        self._items: dict[int, Greeter] = {}
        self._next_id = 1

    def save(self, greeter: Greeter) -> Greeter:
        """Store a new greeter and return it with its id."""
        stored = replace(greeter, id=self._next_id)
        self._items[stored.id] = stored
        self._next_id += 1
        return stored

    def update(self, greeter: Greeter) -> Greeter:
        """Replace a stored greeter; raise KeyError if it is unknown."""
        if greeter.id not in self._items:
            raise KeyError(f"greeter not found: {greeter.id}")
        stored = replace(greeter)
        self._items[stored.id] = stored
        return stored

    def find_by_id(self, greeter_id: int) -> Optional[Greeter]:
        """Return the greeter with this id, or None."""
        return self._items.get(greeter_id)

    def list_by_hello(self, hello: str) -> list[Greeter]:
        """Return the greeters with this greeting."""
        return [item for item in self._items.values() if item.hello == hello]

    def list_all(self) -> list[Greeter]:
        """Return every greeter in the order saved."""
        return list(self._items.values())


class GreeterUsecase:
    """Business logic around greeters."""

    def __init__(self, repo: InMemoryGreeterRepo) -> None:
        self._repo = repo

    def create_greeter(self, greeter: Greeter) -> Greeter:
        """Save a greeter and return what was stored."""
        _log.info("CreateGreeter: %s", greeter.hello)
        return self._repo.save(greeter)


class GreeterService:
    """Answers hello requests."""

    def __init__(self, usecase: GreeterUsecase) -> None:
        self._usecase = usecase

    def say_hello(self, name: str) -> str:
        """Record the name and return a greeting for it."""
        greeter = self._usecase.create_greeter(Greeter(hello=name))
        return "Hello " + greeter.hello