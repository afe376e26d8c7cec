from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChangeOperation(str, Enum):
    addition = "addition"  # added or modified
    deletion = "deletion"

    @classmethod
    def from_status(cls, status: str) -> Optional["ChangeOperation"]:
        code = (status or "")[:1]
        if code in ("A", "M"):
            return cls.addition
        if code == "D":
            return cls.deletion
        return None


class ClassifiedChange(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    operation: ChangeOperation
    folder: str  # source folder the member was found under, e.g. "classes", "fields"
    metadata_type: str  # e.g. "ApexClass"
    member: str
    path: str  # relative to the source folder
    copy_path: Optional[str] = None  # directory to copy instead of `path`, for bundles


class BuildResult(BaseModel):
    model_config = ConfigDict(extra="forbid")
    compare: str
    branch: str
    dry_run: bool = False
    package_xml: str
    destructive_xml: str
    has_deletions: bool = False
    package_dir: Optional[Path] = None
    destructive_dir: Optional[Path] = None
    copied_files: List[str] = Field(default_factory=list)
