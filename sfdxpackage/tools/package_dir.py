from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, List

from sfdxpackage.exceptions.errors import PackageWriteError

logger = logging.getLogger(__name__)

META_SUFFIX = "-meta.xml"

PACKAGE_DIR = "unpackaged"
PACKAGE_FILE = "package.xml"
DESTRUCTIVE_DIR = "destructive"
DESTRUCTIVE_FILE = "destructiveChanges.xml"


def build_package_dir(target: str | Path, branch: str, xml: str, *, destructive: bool = False) -> Path:
    """
    Writes <target>/<branch>/unpackaged/package.xml, or
    <target>/<branch>/destructive/destructiveChanges.xml when destructive.
    Returns the directory written to.
    """
    if destructive:
        package_dir = Path(target) / branch / DESTRUCTIVE_DIR
        file_name = DESTRUCTIVE_FILE
    else:
        package_dir = Path(target) / branch / PACKAGE_DIR
        file_name = PACKAGE_FILE

    try:
        package_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PackageWriteError(f"Failed to write package directory {package_dir}: {e}") from e

    try:
        (package_dir / file_name).write_text(xml, encoding="utf-8")
    except OSError as e:
        raise PackageWriteError(f"Failed to write xml file {package_dir / file_name}: {e}") from e

    return package_dir


def companion_path(file: str) -> str:
    """The -meta.xml sidecar of a source file, or the source file of a sidecar."""
    if file.endswith(META_SUFFIX):
        return file[: -len(META_SUFFIX)]
    return file + META_SUFFIX


def _copy(src: Path, dst: Path) -> None:
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        if src.is_dir():
            shutil.copytree(src, dst, dirs_exist_ok=True)
        else:
            shutil.copy2(src, dst)
    except OSError as e:
        raise PackageWriteError(f"Failed to copy {src} to {dst}: {e}") from e


def copy_files(source_dir: str | Path, build_dir: str | Path, files: Iterable[str]) -> List[str]:
    """
    Copies each file (relative to source_dir) to the same relative path under
    build_dir, together with its companion sidecar when one exists.

    Files missing from source_dir are skipped. Returns the relative paths copied.
    """
    source = Path(source_dir)
    build = Path(build_dir)
    copied: List[str] = []

    def copy_one(rel: str) -> None:
        if rel in copied:
            return
        _copy(source / rel, build / rel)
        copied.append(rel)

    for file in files:
        if not file:
            continue
        if not (source / file).exists():
            logger.debug("COPY_SKIP missing=%s", source / file)
            continue

        copy_one(file)
        companion = companion_path(file)
        if (source / companion).exists():
            copy_one(companion)

    return copied
