from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from sfdxpackage.domain.schemas.package import ChangeOperation, ClassifiedChange


class MetadataBag:
    """Members grouped by metadata type, both in first-seen order, without duplicates."""

    def __init__(self) -> None:
        self._members: Dict[str, List[str]] = {}

    def add(self, metadata_type: str, member: str) -> bool:
        members = self._members.setdefault(metadata_type, [])
        if member in members:
            return False
        members.append(member)
        return True

    def discard(self, metadata_type: str, member: str) -> None:
        members = self._members.get(metadata_type)
        if members is None or member not in members:
            return
        members.remove(member)
        if not members:
            del self._members[metadata_type]

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for metadata_type, members in self._members.items():
            yield metadata_type, list(members)

    def members(self, metadata_type: str) -> List[str]:
        return list(self._members.get(metadata_type, []))

    @property
    def types(self) -> List[str]:
        return list(self._members)

    def as_dict(self) -> Dict[str, List[str]]:
        return {t: list(m) for t, m in self._members.items()}

    def __contains__(self, metadata_type: object) -> bool:
        return metadata_type in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"MetadataBag({self._members!r})"


@dataclass
class ChangeSet:
    additions: MetadataBag = field(default_factory=MetadataBag)
    deletions: MetadataBag = field(default_factory=MetadataBag)
    files: List[str] = field(default_factory=list)  # to copy, relative to the source folder
    _file_owners: Dict[str, Tuple[str, str]] = field(default_factory=dict, repr=False)

    @property
    def has_deletions(self) -> bool:
        return len(self.deletions) > 0

    def add(self, change: ClassifiedChange) -> None:
        """A member that is deleted never also appears in additions."""
        key = (change.metadata_type, change.member)
        if change.operation is ChangeOperation.deletion:
            self.deletions.add(*key)
            self.additions.discard(*key)
            self.files = [f for f in self.files if self._file_owners.get(f) != key]
            return

        if change.member in self.deletions.members(change.metadata_type):
            return
        self.additions.add(*key)
        copy_path = change.copy_path or change.path
        if copy_path not in self.files:
            self.files.append(copy_path)
            self._file_owners[copy_path] = key
