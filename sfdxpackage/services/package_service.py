from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from sfdxpackage.config.settings import settings
from sfdxpackage.domain.metadata.accumulator import ChangeSet
from sfdxpackage.domain.metadata.classifier import classify_entry
from sfdxpackage.domain.metadata.type_map import TypeMapRegistry
from sfdxpackage.domain.schemas.package import BuildResult, ChangeOperation
from sfdxpackage.manifest.writer import normalize_api_version, package_writer
from sfdxpackage.tools.git_diff import get_name_status, parse_name_status
from sfdxpackage.tools.package_dir import build_package_dir, copy_files

logger = logging.getLogger(__name__)


class PackageService:
    """
    Thin orchestrator (facade).

    - git diff --name-status -> classify each entry -> accumulate
    - render package.xml / destructiveChanges.xml
    - write them under <target>/<branch>/ and copy the changed source files

    Defaults come from settings; constructor arguments override them.
    """

    def __init__(
        self,
        *,
        source_dir: Optional[str] = None,
        api_version: Optional[str] = None,
        repo_path: Optional[Path] = None,
        type_map: Optional[TypeMapRegistry] = None,
    ) -> None:
        self._source_prefix = source_dir.strip("/") + "/" if source_dir else settings.source_prefix
        self._api_version = normalize_api_version(api_version or settings.api_version)
        self._repo_path = repo_path or settings.repo_path
        self._type_map = type_map or TypeMapRegistry(overrides_file=settings.type_map_file)

    @property
    def source_path(self) -> Path:
        base = Path(self._repo_path) if self._repo_path else Path(os.getcwd())
        return base / self._source_prefix

    def collect(self, compare: str, branch: str) -> ChangeSet:
        raw = get_name_status(
            compare,
            branch,
            repo_path=str(self._repo_path) if self._repo_path else None,
            timeout=settings.git_timeout,
        )
        return self.collect_from_text(raw)

    def collect_from_text(self, name_status: str) -> ChangeSet:
        changes = ChangeSet()
        for entry in parse_name_status(name_status):
            change = classify_entry(entry, source_prefix=self._source_prefix, type_map=self._type_map)
            if change is None:
                continue

            if change.operation is ChangeOperation.deletion:
                logger.info("File was deleted: %s", change.path)
            else:
                logger.info("File was added or modified: %s", change.path)
            changes.add(change)
        return changes

    def render(self, changes: ChangeSet) -> Tuple[str, str]:
        package_xml = package_writer(changes.additions, self._api_version)
        destructive_xml = package_writer(changes.deletions, self._api_version)
        return package_xml, destructive_xml

    def build(
        self,
        compare: str,
        branch: str,
        target: Optional[str | Path] = None,
        *,
        dry_run: bool = False,
    ) -> BuildResult:
        changes = self.collect(compare, branch)
        package_xml, destructive_xml = self.render(changes)
        result = BuildResult(
            compare=compare,
            branch=branch,
            dry_run=dry_run,
            package_xml=package_xml,
            destructive_xml=destructive_xml,
            has_deletions=changes.has_deletions,
        )
        if dry_run:
            return result
        if target is None:
            raise ValueError("target is required when not running a dry run")

        logger.info("Building in directory %s", target)
        result.package_dir = build_package_dir(target, branch, package_xml)
        result.copied_files = copy_files(self.source_path, result.package_dir, changes.files)
        logger.info("Successfully created package.xml and files in %s", result.package_dir)

        if changes.has_deletions:
            result.destructive_dir = build_package_dir(target, branch, destructive_xml, destructive=True)
            logger.info("Successfully created destructiveChanges.xml in %s", result.destructive_dir)

        logger.info(
            "BUILD_DONE compare=%s branch=%s types=%d files=%d deletions=%s",
            compare,
            branch,
            len(changes.additions),
            len(result.copied_files),
            changes.has_deletions,
        )
        return result
