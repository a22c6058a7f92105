"""Workspace: the persisted set of languages and the current selection."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from alchemist.core.language import Language
from alchemist.core.utils.json import read_json, write_json
from alchemist.core.utils.logging import get_logger

logger = logging.getLogger(__name__)


class Workspace(BaseModel):
    """Ordered languages plus the index of the one being edited.

    Example:
        >>> workspace = Workspace.load("alchemist_workspace.json")
        >>> language = workspace.new_language("Elvish")
        >>> workspace.save("alchemist_workspace.json")
    """

    model_config = ConfigDict(extra="forbid")

    languages: list[Language] = Field(default_factory=list)
    current: int | None = None

    @model_validator(mode="after")
    def _check_current(self) -> Workspace:
        if self.current is not None and not 0 <= self.current < len(self.languages):
            raise ValueError(f"current index {self.current} out of range")
        return self

    @property
    def current_language(self) -> Language | None:
        if self.current is None:
            return None
        return self.languages[self.current]

    def new_language(self, name: str | None = None) -> Language:
        """Append a new language and select it."""
        language = Language(name=name) if name else Language()
        self.languages.append(language)
        self.current = len(self.languages) - 1
        logger.debug("Created language %r", language.name)
        return language

    def select(self, index: int) -> Language:
        """Make the language at ``index`` current.

        Raises:
            IndexError: If ``index`` is out of range
        """
        if not 0 <= index < len(self.languages):
            raise IndexError(f"Language index {index} out of range")
        self.current = index
        return self.languages[index]

    def find(self, name: str) -> int | None:
        """Index of the first language called ``name``, or None."""
        for index, language in enumerate(self.languages):
            if language.name == name:
                return index
        return None

    def save(self, path: str | Path) -> None:
        """Record capture labels on every grammar, then write JSON."""
        for language in self.languages:
            language.grammar.prepare_for_save()
        write_json(path, self.model_dump(mode="json"))
        log = get_logger(__name__, workspace=str(path))
        log.info("Saved %d language(s) to %s", len(self.languages), path)

    @classmethod
    def load(cls, path: str | Path) -> Workspace:
        """Read a workspace, or return an empty one if the file is missing.

        Raises:
            ValidationError: If the document does not describe a workspace
        """
        path = Path(path)
        log = get_logger(__name__, workspace=str(path))
        if not path.exists():
            log.info("No workspace at %s, starting empty", path)
            return cls()

        workspace = cls.model_validate(read_json(path))
        for language in workspace.languages:
            language.grammar.resolve_after_load()
        log.info("Loaded %d language(s) from %s", len(workspace.languages), path)
        return workspace


__all__ = [
    "Workspace",
]
