"""
Build Salesforce deployment manifests from a git diff.

Compares two branches of an SFDX project, classifies each changed file under
the source folder into a metadata type/member pair, and writes:

- <target>/<branch>/unpackaged/package.xml plus copies of the changed files
- <target>/<branch>/destructive/destructiveChanges.xml when files were deleted
"""

__version__ = "0.1.0"
