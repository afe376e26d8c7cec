from __future__ import annotations


class SfdxPackageError(RuntimeError):
    exit_code: int = 1


class GitError(SfdxPackageError):
    pass


class ClassificationError(SfdxPackageError):
    """A changed path sits under the source folder but maps to no member."""


class TypeMapError(SfdxPackageError):
    pass


class PackageWriteError(SfdxPackageError):
    pass
