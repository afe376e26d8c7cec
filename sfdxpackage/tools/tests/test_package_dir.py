"""
Tests for package_dir.py
"""
from pathlib import Path

import pytest

from sfdxpackage.tools.package_dir import build_package_dir, companion_path, copy_files


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """SFDX source folder with a few components"""
    root = tmp_path / "src"
    (root / "classes").mkdir(parents=True)
    (root / "classes" / "Foo.cls").write_text("public class Foo {}", encoding="utf-8")
    (root / "classes" / "Foo.cls-meta.xml").write_text("<ApexClass/>", encoding="utf-8")
    (root / "classes" / "Bar.cls").write_text("public class Bar {}", encoding="utf-8")
    (root / "lwc" / "hello").mkdir(parents=True)
    (root / "lwc" / "hello" / "hello.js").write_text("export default class {}", encoding="utf-8")
    (root / "lwc" / "hello" / "hello.html").write_text("<template></template>", encoding="utf-8")
    return root


def test_build_package_dir(tmp_path: Path):
    package_dir = build_package_dir(tmp_path / "deploy", "feature", "<Package/>")

    assert package_dir == tmp_path / "deploy" / "feature" / "unpackaged"
    assert (package_dir / "package.xml").read_text(encoding="utf-8") == "<Package/>"


def test_build_destructive_dir(tmp_path: Path):
    package_dir = build_package_dir(str(tmp_path), "feature", "<Package/>", destructive=True)

    assert package_dir == tmp_path / "feature" / "destructive"
    assert (package_dir / "destructiveChanges.xml").exists()
    assert not (tmp_path / "feature" / "unpackaged").exists()


def test_build_package_dir_with_slashed_branch(tmp_path: Path):
    package_dir = build_package_dir(tmp_path, "feature/login", "<Package/>")
    assert package_dir == tmp_path / "feature" / "login" / "unpackaged"


def test_companion_path():
    assert companion_path("classes/Foo.cls") == "classes/Foo.cls-meta.xml"
    assert companion_path("classes/Foo.cls-meta.xml") == "classes/Foo.cls"


def test_copy_source_brings_sidecar(source: Path, tmp_path: Path):
    build = tmp_path / "build"
    copied = copy_files(source, build, ["classes/Foo.cls"])

    assert copied == ["classes/Foo.cls", "classes/Foo.cls-meta.xml"]
    assert (build / "classes" / "Foo.cls-meta.xml").read_text(encoding="utf-8") == "<ApexClass/>"


def test_copy_sidecar_brings_source(source: Path, tmp_path: Path):
    build = tmp_path / "build"
    copied = copy_files(source, build, ["classes/Foo.cls-meta.xml"])

    assert copied == ["classes/Foo.cls-meta.xml", "classes/Foo.cls"]
    assert (build / "classes" / "Foo.cls").exists()


def test_copy_without_sidecar(source: Path, tmp_path: Path):
    copied = copy_files(source, tmp_path / "build", ["classes/Bar.cls"])
    assert copied == ["classes/Bar.cls"]


def test_copy_both_listed_copies_each_once(source: Path, tmp_path: Path):
    copied = copy_files(source, tmp_path / "build", ["classes/Foo.cls", "classes/Foo.cls-meta.xml"])
    assert copied == ["classes/Foo.cls", "classes/Foo.cls-meta.xml"]


def test_missing_files_are_skipped(source: Path, tmp_path: Path):
    build = tmp_path / "build"
    copied = copy_files(source, build, ["classes/Deleted.cls", "", "classes/Bar.cls"])

    assert copied == ["classes/Bar.cls"]
    assert not (build / "classes" / "Deleted.cls").exists()


def test_copy_directory(source: Path, tmp_path: Path):
    build = tmp_path / "build"
    copied = copy_files(source, build, ["lwc/hello"])

    assert copied == ["lwc/hello"]
    assert (build / "lwc" / "hello" / "hello.html").exists()
