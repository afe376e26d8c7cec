"""
Classify `git diff --name-status` entries into metadata type/member pairs.

Paths are taken relative to the source folder (force-app/main/default/) and
split on "/":

    classes/Foo.cls                          -> ApexClass            Foo
    objects/Account/fields/Bar__c.field...   -> CustomField          Account.Bar__c
    email/Folder/Template.email              -> EmailTemplate        Folder/Template
    lwc/myCmp/myCmp.js                       -> LightningComponent.. myCmp
    customMetadata/Cfg__mdt.Rec.md-meta.xml  -> CustomMetadata       Cfg__mdt.Rec
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sfdxpackage.domain.metadata.type_map import TypeMapRegistry
from sfdxpackage.domain.schemas.diff import DiffEntry
from sfdxpackage.domain.schemas.package import ChangeOperation, ClassifiedChange
from sfdxpackage.exceptions.errors import ClassificationError
from sfdxpackage.tools.git_diff import parse_name_status_line

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_PREFIX = "force-app/main/default/"

_IGNORED_PATHS = frozenset({"manifest/package.xml"})
_SKIPPED_FOLDERS = frozenset({"staticresources"})
_BUNDLE_FOLDERS = frozenset({"aura", "lwc"})
# the directory itself is the component; files below it are its parts
_COMPONENT_DIR_FOLDERS = frozenset({"objects", "objectTranslations"})
# copied as a whole directory; the deploy needs every file of the component
_DIRECTORY_COPY_FOLDERS = _BUNDLE_FOLDERS | {"objectTranslations"}

_AURA_DEFINITION_SUFFIXES = (".cmp", ".app", ".evt", ".intf", ".tokens")

_DEFAULT_TYPE_MAP = TypeMapRegistry()


def _stem(file_name: str) -> str:
    return file_name.split(".")[0]


def is_definition_file(parts: List[str]) -> bool:
    """
    True when the path is the file whose deletion removes a whole bundle or
    component directory (lwc, aura, objects, objectTranslations).
    """
    if len(parts) != 3:
        return False
    folder, name, file_name = parts
    if folder == "lwc":
        return file_name == f"{name}.js-meta.xml"
    if folder == "aura":
        return any(
            file_name in (name + suffix, name + suffix + "-meta.xml") for suffix in _AURA_DEFINITION_SUFFIXES
        )
    if folder == "objects":
        return file_name == f"{name}.object-meta.xml"
    if folder == "objectTranslations":
        return file_name == f"{name}.objectTranslation-meta.xml"
    return False


def _is_component_part(parts: List[str]) -> bool:
    if parts[0] in _BUNDLE_FOLDERS:
        return len(parts) >= 3
    return parts[0] in _COMPONENT_DIR_FOLDERS and len(parts) == 3


def split_member(parts: List[str]) -> Tuple[str, str]:
    """
    Returns (folder, member) for a path already split on "/".
    `parts` must have at least two elements.
    """
    folder = parts[0]

    if folder in _BUNDLE_FOLDERS and len(parts) >= 3:
        return folder, parts[1]

    if len(parts) == 4:
        # objects/<Object>/<childFolder>/<file>
        member = f"{parts[1]}.{_stem(parts[3])}"
        child = parts[2]
        if child == "webLinks" and folder == "objects":
            child = "objectWebLinks"
        return child, member

    if len(parts) == 3:
        if folder in _COMPONENT_DIR_FOLDERS:
            return folder, parts[1]
        # foldered metadata: email, documents, reports, dashboards
        return folder, f"{parts[1]}/{_stem(parts[2])}"

    name_parts = parts[1].split(".")
    member = name_parts[0].replace("-meta", "")
    if len(name_parts) > 3:
        # custom metadata records keep their dotted name
        member = ".".join(name_parts[:-1]).replace(".md-meta", "").replace("-meta", "")
    return folder, member


def classify_entry(
    entry: DiffEntry,
    *,
    source_prefix: str = DEFAULT_SOURCE_PREFIX,
    type_map: Optional[TypeMapRegistry] = None,
) -> Optional[ClassifiedChange]:
    """
    Returns the classified change, or None when the entry should be skipped.

    Raises ClassificationError for a file directly inside the source folder.

    Deleting one file of a bundle or component directory is a change to that
    component; only deleting its definition file is a deletion.
    """
    path = entry.path
    if path in _IGNORED_PATHS:
        return None
    if len(path) <= len(source_prefix) or not path.startswith(source_prefix):
        return None

    relative = path[len(source_prefix):]
    parts = relative.split("/")
    if parts[0] in _SKIPPED_FOLDERS:
        return None
    if len(parts) < 2:
        raise ClassificationError(f'File name "{relative}" cannot be processed')
    if parts[0] in _BUNDLE_FOLDERS and len(parts) == 2:
        # project tooling (.eslintrc.json, jsconfig.json), not a component
        logger.debug("SKIP bundle folder file=%s", relative)
        return None

    operation = ChangeOperation.from_status(entry.status)
    if operation is None:
        logger.warning("Operation on file needs review: %s (status=%s)", relative, entry.status)
        return None

    folder, member = split_member(parts)
    if not member:
        logger.warning("No member name in %s, skipping", relative)
        return None

    copy_path = None
    if _is_component_part(parts):
        if parts[0] in _DIRECTORY_COPY_FOLDERS:
            copy_path = f"{parts[0]}/{parts[1]}"
        if operation is ChangeOperation.deletion and not is_definition_file(parts):
            logger.info(
                "File of %s %s was deleted, deploying the component as changed: %s", folder, member, relative
            )
            operation = ChangeOperation.addition

    registry = type_map or _DEFAULT_TYPE_MAP
    return ClassifiedChange(
        operation=operation,
        folder=folder,
        metadata_type=registry.resolve(folder),
        member=member,
        path=relative,
        copy_path=copy_path,
    )


def classify_line(
    line: str,
    *,
    source_prefix: str = DEFAULT_SOURCE_PREFIX,
    type_map: Optional[TypeMapRegistry] = None,
) -> Optional[ClassifiedChange]:
    entry = parse_name_status_line(line)
    if entry is None:
        return None
    return classify_entry(entry, source_prefix=source_prefix, type_map=type_map)
