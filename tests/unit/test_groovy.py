"""Unit tests for Groovy file classification."""

import os
import tempfile
from pathlib import Path

import pytest
from bootpack.groovy.classify import GroovyKind, classify, find_groovy_files
from bootpack.groovy.command import join_files, launch_files


class TestClassify:
    def test_pogo(self):
        assert classify("app.groovy", b"class X {") is GroovyKind.POGO

    def test_pogo_with_modifiers_and_annotations(self):
        content = b"@RestController\npublic class Hello extends Base implements Api {\n}\n"
        assert classify("hello.groovy", content) is GroovyKind.POGO

    def test_config(self):
        assert classify("beans.groovy", b"beans {\n  foo(String)\n}") is GroovyKind.CONFIG

    def test_invalid(self):
        assert classify("test.groovy", b"x") is GroovyKind.INVALID
        assert classify("test.groovy", b"test") is GroovyKind.INVALID

    def test_undecodable_is_invalid(self):
        assert classify("test.groovy", b"\xff\xfe class X {") is GroovyKind.INVALID

    def test_logback_ignored(self):
        assert classify("logback.groovy", b"class X {") is GroovyKind.IGNORE
        assert classify(os.path.join("ch", "qos", "logback", "test.groovy"), b"class X {") is GroovyKind.IGNORE

    def test_logback_import_is_still_pogo(self):
        content = b"import ch.qos.logback.classic.Level\n\n@RestController\nclass App {\n}\n"
        assert classify("app.groovy", content) is GroovyKind.POGO

    def test_annotation_on_declaration_line(self):
        assert classify("app.groovy", b"@RestController class App {\n}\n") is GroovyKind.POGO
        assert classify("x.groovy", b"@CompileStatic final class X {") is GroovyKind.POGO
        assert classify("y.groovy", b"@groovy.transform.TypeChecked(extensions = ['a']) class Y {") is GroovyKind.POGO

    def test_kind_flags(self):
        assert GroovyKind.POGO.qualifies and GroovyKind.CONFIG.qualifies
        assert not GroovyKind.INVALID.qualifies
        assert GroovyKind.INVALID.launched
        assert not GroovyKind.IGNORE.launched


class TestFindGroovyFiles:
    def test_skips_groovy_directories(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "groovy").mkdir()
            (root / "groovy" / "hidden.groovy").write_text("class Hidden {")
            (root / "src" / "groovy" / "deep").mkdir(parents=True)
            (root / "src" / "groovy" / "deep" / "deeper.groovy").write_text("class Deeper {")
            (root / "app.groovy").write_text("class App {")

            files = find_groovy_files(root)

        assert [os.path.basename(f.path) for f in files] == ["app.groovy"]

    def test_ignores_other_extensions(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "App.java").write_text("class App {")
            assert find_groovy_files(tmpdir) == []

    def test_absolute_paths(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "app.groovy").write_text("class App {")
            files = find_groovy_files(tmpdir)
        assert os.path.isabs(files[0].path)

    def test_logback_ancestor_outside_root_not_ignored(self, tmp_path):
        root = tmp_path / "ch" / "qos" / "logback" / "app"
        root.mkdir(parents=True)
        (root / "app.groovy").write_text("class X {")

        files = find_groovy_files(root)

        assert [f.kind for f in files] == [GroovyKind.POGO]

    def test_logback_package_inside_root_ignored(self, tmp_path):
        (tmp_path / "ch" / "qos" / "logback").mkdir(parents=True)
        (tmp_path / "ch" / "qos" / "logback" / "config.groovy").write_text("class X {")
        assert [f.kind for f in find_groovy_files(tmp_path)] == [GroovyKind.IGNORE]

    def test_unreadable_directory_raises(self, tmp_path, deny_directory):
        (tmp_path / "app.groovy").write_text("class App {")
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "other.groovy").write_text("class Other {")
        deny_directory(tmp_path / "src")

        with pytest.raises(PermissionError):
            find_groovy_files(tmp_path)


class TestLaunchFiles:
    def test_join_keeps_leading_empty_element(self):
        assert join_files(["/a", "/b"]) == os.pathsep + "/a" + os.pathsep + "/b"
        assert join_files([]) == ""

    def test_sorted_and_deduplicated(self):
        from bootpack.groovy.classify import GroovyFile

        files = [
            GroovyFile("/b.groovy", GroovyKind.POGO),
            GroovyFile("/a.groovy", GroovyKind.INVALID),
            GroovyFile("/b.groovy", GroovyKind.POGO),
            GroovyFile("/logback.groovy", GroovyKind.IGNORE),
        ]
        assert launch_files(files) == ["/a.groovy", "/b.groovy"]
