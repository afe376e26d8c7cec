"""
Source folder name -> metadata type name.

The static table is not exhaustive. Folders missing from it can be added per
project through a YAML file (see Settings.type_map_file):

    flexipages: FlexiPage
    globalValueSets: GlobalValueSet
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from sfdxpackage.exceptions.errors import TypeMapError

logger = logging.getLogger(__name__)


METADATA_TYPES: Dict[str, str] = {
    "applications": "CustomApplication",
    "appMenus": "AppMenu",
    "approvalProcesses": "ApprovalProcess",
    "assignmentRules": "AssignmentRules",
    "aura": "AuraDefinitionBundle",
    "authproviders": "AuthProvider",
    "autoResponseRules": "AutoResponseRules",
    "classes": "ApexClass",
    "communities": "Community",
    "components": "ApexComponent",
    "connectedApps": "ConnectedApp",
    "customPermissions": "CustomPermission",
    "customMetadata": "CustomMetadata",
    "dashboards": "Dashboard",
    "documents": "Document",
    "email": "EmailTemplate",
    "escalationRules": "EscalationRules",
    "flowDefinitions": "FlowDefinition",
    "flows": "Flow",
    "groups": "Group",
    "homePageComponents": "HomePageComponent",
    "homePageLayouts": "HomePageLayout",
    "installedPackages": "InstalledPackage",
    "labels": "CustomLabels",
    "layouts": "Layout",
    "letterhead": "Letterhead",
    "lwc": "LightningComponentBundle",
    "managedTopics": "ManagedTopics",
    "matchingRules": "MatchingRule",
    "namedCredentials": "NamedCredential",
    "networks": "Network",
    "objects": "CustomObject",
    "objectTranslations": "CustomObjectTranslation",
    "pages": "ApexPage",
    "permissionsets": "PermissionSet",
    "profiles": "Profile",
    "queues": "Queue",
    "quickActions": "QuickAction",
    "remoteSiteSettings": "RemoteSiteSetting",
    "reports": "Report",
    "reportTypes": "ReportType",
    "roles": "Role",
    "staticresources": "StaticResource",
    "triggers": "ApexTrigger",
    "tabs": "CustomTab",
    "sharingRules": "SharingRules",
    "sharingSets": "SharingSet",
    "siteDotComSites": "SiteDotCom",
    "sites": "CustomSite",
    "workflows": "Workflow",
    "weblinks": "CustomPageWebLink",
    # children of objects/<Object>/
    "businessProcesses": "BusinessProcess",
    "compactLayouts": "CompactLayout",
    "fields": "CustomField",
    "fieldSets": "FieldSet",
    "listViews": "ListView",
    "objectWebLinks": "WebLink",
    "recordTypes": "RecordType",
    "validationRules": "ValidationRule",
}


def load_overrides(path: Path) -> Dict[str, str]:
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise TypeMapError(f"Cannot read type map file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise TypeMapError(f"Invalid YAML in type map file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeMapError(f"Type map file {path} must contain a mapping of folder: TypeName")

    overrides: Dict[str, str] = {}
    for folder, type_name in data.items():
        if not isinstance(folder, str) or not isinstance(type_name, str) or not type_name.strip():
            raise TypeMapError(f"Invalid type map entry in {path}: {folder!r}: {type_name!r}")
        overrides[folder] = type_name.strip()
    return overrides


class TypeMapRegistry:
    def __init__(
        self,
        overrides_file: Optional[Path] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ):
        self._types: Dict[str, str] = dict(METADATA_TYPES)
        if overrides_file is not None:
            self._types.update(load_overrides(overrides_file))
            logger.debug("TYPE_MAP overrides_file=%s", overrides_file)
        if overrides:
            self._types.update(overrides)
        self._warned: set[str] = set()

    def __contains__(self, folder: str) -> bool:
        return folder in self._types

    def resolve(self, folder: str) -> str:
        """Metadata type name for a folder; unknown folders resolve to themselves."""
        type_name = self._types.get(folder)
        if type_name is not None:
            return type_name
        if folder not in self._warned:
            self._warned.add(folder)
            logger.warning("No metadata type mapped for folder %r, using the folder name", folder)
        return folder
