from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffEntry:
    """
    One line of `git diff --name-status` output.

    Attributes:
        status: git status letters (e.g. "A", "M", "D", "R100")
        path: repository-relative path; for renames/copies the new path
    """
    status: str
    path: str

    @property
    def operation(self) -> str:
        return self.status[:1]
