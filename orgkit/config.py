"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_todo_keywords() -> tuple[list[str], list[str]]:
    return (["TODO"], ["DONE"])


@dataclass
class ParseConfig:
    """Settings that influence how a document is parsed.

    ``todo_keywords`` holds two lists: the keywords that mark an open task
    and the keywords that mark a finished one.
    """

    todo_keywords: tuple[list[str], list[str]] = field(
        default_factory=_default_todo_keywords
    )

    def is_todo_keyword(self, word: str) -> bool:
        """Return True if ``word`` is one of the configured todo keywords."""
        todo, done = self.todo_keywords
        return word in todo or word in done


DEFAULT_CONFIG = ParseConfig()