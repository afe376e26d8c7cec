"""
Build a package.xml (and destructiveChanges.xml) from a git diff.

Usage:
    # Write ./deploy/featureBranch/unpackaged/package.xml and copy changed files
    sfdxpackage master featureBranch ./deploy/

    # Only print the manifests that would be generated
    sfdxpackage master featureBranch --dryrun

    # Use API version 48.0 in the manifests
    sfdxpackage master featureBranch ./deploy/ -p 48

When files were deleted, ./deploy/featureBranch/destructive/destructiveChanges.xml
is written as well.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sfdxpackage import __version__
from sfdxpackage.config.settings import settings
from sfdxpackage.domain.schemas.package import BuildResult
from sfdxpackage.exceptions.errors import SfdxPackageError
from sfdxpackage.exceptions.handlers import handle_error
from sfdxpackage.manifest.writer import normalize_api_version
from sfdxpackage.services.package_service import PackageService
from sfdxpackage.shared.logging import setup_logging


def _api_version(value: str) -> str:
    try:
        return normalize_api_version(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def print_dry_run(result: BuildResult) -> None:
    """Print both manifests."""
    print("\npackage.xml\n")
    print(result.package_xml)
    print("\ndestructiveChanges.xml\n")
    print(result.destructive_xml)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfdxpackage",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("compare", help="Branch or commit to compare against")
    parser.add_argument("branch", help="Branch or commit holding the changes")
    parser.add_argument("target", nargs="?", help="Directory to build the package in")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-d",
        "--dryrun",
        action="store_true",
        help="Only print the package.xml and destructiveChanges.xml that would be generated",
    )
    parser.add_argument(
        "-p",
        "--pversion",
        type=_api_version,
        help="Salesforce API version of the package.xml",
    )
    parser.add_argument("-s", "--silent", action="store_true", help="Run silently, no output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.dryrun and not args.target:
        print("target required when not dry-run", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    setup_logging(settings.log_level, silent=args.silent)

    try:
        service = PackageService(api_version=args.pversion)
        result = service.build(args.compare, args.branch, args.target, dry_run=args.dryrun)
    except SfdxPackageError as exc:
        return handle_error(exc)

    if result.dry_run:
        print_dry_run(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
