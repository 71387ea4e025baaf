"""Registry of game levels and switching between them."""

from __future__ import annotations

from typing import Any, Callable

LevelFactory = Callable[[], Any]


def _call_hook(level: Any, name: str) -> None:
    hook = getattr(level, name, None)
    if callable(hook):
        hook()


class LevelManager:
    """Creates levels by name and swaps the current level on refresh.

    A level may define ``begin_play``, ``on_level_load`` and
    ``on_level_delete``; each is called when present.
    """

    def __init__(self) -> None:
        self._levels: dict[str, LevelFactory] = {}
        self.current: Any = None
        self._to_delete: Any = None
        self._to_create: LevelFactory | None = None

    def add_level(self, name: str, factory: LevelFactory) -> None:
        """Register a level under ``name``; a name already taken keeps its factory."""
        self._levels.setdefault(name, factory)

    def set_default_level(self, name: str) -> None:
        """Schedule ``name`` to replace the current level at the next refresh.

        An unknown name leaves the previously chosen level in place, so the
        next refresh reloads that one.
        """
        self._to_delete = self.current
        if name in self._levels:
            self._to_create = self._levels[name]

    def start(self) -> Any:
        """Create the chosen level as the first current level."""
        if self._to_create is None:
            raise LookupError("no level has been chosen")
        self.current = self._to_create()
        _call_hook(self.current, "begin_play")
        return self.current

    def refresh_level(self) -> bool:
        """Perform a scheduled level switch; return whether one happened."""
        if self._to_delete is None or self._to_create is None:
            return False
        _call_hook(self._to_delete, "on_level_delete")
        self._to_delete = None
        self.current = self._to_create()
        _call_hook(self.current, "on_level_load")
        _call_hook(self.current, "begin_play")
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._levels