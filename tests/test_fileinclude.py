#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
End-to-end test-suite for *fileinclude*.

Every test builds a throw-away source tree, runs the CLI façade
(`FileInclude.run`) from inside it and inspects the destination tree and
the returned RunSummary.
"""
from __future__ import annotations

import contextlib
import io
import json
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from typing import Iterator, List
from unittest.mock import patch

from fileinclude import FileInclude, RunSummary
from fileinclude.cli import main
from fileinclude.core.interfaces import FragmentClassifierProtocol
from fileinclude.runtime.runner import IncludeRunner
from tests.tools.build_fixtures import build_minimal, build_site, write_tree


@contextlib.contextmanager
def _inside(path: Path) -> Iterator[None]:
    """Temporarily switch CWD to *path*."""
    cwd = Path.cwd()
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(cwd)


class FileIncludeBaseTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def run_cli(self, args: List[str]) -> RunSummary:
        with _inside(self.root):
            return FileInclude.run(args)

    def read(self, rel: str) -> str:
        return (self.root / rel).read_text(encoding="utf-8")


# --------------------------------------------------------------------------- #
#  1. Defaults                                                                #
# --------------------------------------------------------------------------- #
class DefaultRunTests(FileIncludeBaseTest):
    def test_minimal_site(self) -> None:
        build_minimal(self.root)
        summary = self.run_cli(["-s", "src"])
        self.assertEqual(self.read("build/index.html"), "<h1>Hi</h1>\n")
        self.assertFalse((self.root / "build/partials/header.html").exists())
        self.assertEqual((summary.written, summary.errors), (1, 0))

    def test_summary_line_is_logged(self) -> None:
        build_minimal(self.root)
        with self.assertLogs("fileinclude", level="INFO") as logs:
            self.run_cli(["-s", "src"])
        self.assertIn("Files written: 1, File errors: 0", "\n".join(logs.output))

    def test_fragments_and_plain_files_are_not_written(self) -> None:
        build_site(self.root)
        summary = self.run_cli(["-s", "src"])
        written = sorted(p.relative_to(self.root / "build").as_posix() for p in (self.root / "build").rglob("*") if p.is_file())
        self.assertEqual(written, ["about.html", "index.html"])
        self.assertEqual(
            self.read("build/about.html"),
            "<html><header><nav>menu</nav></header><p>about</p><footer>bye</footer></html>\n",
        )
        self.assertEqual(summary.written, 2)

    def test_no_match_writes_nothing(self) -> None:
        build_site(self.root)
        summary = self.run_cli(["-s", "src", "-i", "**/*.tpl"])
        self.assertEqual((summary.written, summary.errors), (0, 0))
        self.assertFalse((self.root / "build").exists())


# --------------------------------------------------------------------------- #
#  2. Flags                                                                   #
# --------------------------------------------------------------------------- #
class FlagTests(FileIncludeBaseTest):
    def test_keep_source_parent(self) -> None:
        build_minimal(self.root)
        self.run_cli(["-s", "src", "-o", "false"])
        self.assertEqual(self.read("build/src/index.html"), "<h1>Hi</h1>\n")

    def test_custom_destination(self) -> None:
        build_minimal(self.root)
        self.run_cli(["-s", "src", "-d", "out/site"])
        self.assertTrue((self.root / "out/site/index.html").is_file())

    def test_non_recursive(self) -> None:
        build_site(self.root)
        self.run_cli(["-s", "src", "-r", "false"])
        self.assertIn("<header>@@include('nav.html')</header>", self.read("build/index.html"))

    def test_include_list_accepts_commas_and_repeats(self) -> None:
        write_tree(self.root, {
            "src/a.html": "@@include('p.txt')",
            "src/b.xml": "@@include('p.txt')",
            "src/c.svg": "@@include('p.txt')",
            "src/p.txt": "P",
        })
        summary = self.run_cli(["-s", "src", "-i", "*.html,*.xml", "-i", "*.svg"])
        self.assertEqual(summary.written, 3)
        self.assertEqual(self.read("build/b.xml"), "P")

    def test_several_sources(self) -> None:
        write_tree(self.root, {
            "one/a.html": "@@include('x.html')",
            "one/x.html": "1",
            "two/b.html": "@@include('y.html')",
            "two/y.html": "2",
        })
        summary = self.run_cli(["-s", "one", "two"])
        self.assertEqual(summary.written, 2)
        self.assertEqual(self.read("build/a.html") + self.read("build/b.html"), "12")

    def test_no_placeholder(self) -> None:
        write_tree(self.root, {"src/index.html": "<p>@@include('gone.html')</p>"})
        with self.assertLogs("fileinclude", level="ERROR"):
            summary = self.run_cli(["-s", "src", "--no-placeholder"])
        self.assertEqual(self.read("build/index.html"), "<p>@@include('gone.html')</p>")
        self.assertEqual((summary.written, summary.errors), (1, 1))

    def test_copy_plain(self) -> None:
        build_site(self.root)
        summary = self.run_cli(["-s", "src", "--copy-plain"])
        self.assertEqual(summary.written, 3)
        self.assertEqual(self.read("build/plain.html"), "<p>no directives here</p>\n")
        self.assertFalse((self.root / "build/partials/nav.html").exists())

    def test_report_file(self) -> None:
        build_minimal(self.root)
        self.run_cli(["-s", "src", "--report", "reports/run.json"])
        data = json.loads(self.read("reports/run.json"))
        self.assertEqual(data["written"], 1)
        self.assertEqual(data["errors"], 0)
        self.assertIn("resolve", data["time_by_stage"])

    def test_max_depth(self) -> None:
        write_tree(self.root, {
            "src/index.html": "@@include('a.html')",
            "src/a.html": "a@@include('b.html')",
            "src/b.html": "b",
        })
        with self.assertLogs("fileinclude", level="ERROR"):
            summary = self.run_cli(["-s", "src", "--max-depth", "1"])
        self.assertEqual(self.read("build/index.html"), "aInclude depth exceeded: b.html")
        self.assertEqual((summary.written, summary.errors), (1, 1))

    def test_custom_classifier_is_used(self) -> None:
        class NoRoots:
            def classify(self, files):
                return []

        build_minimal(self.root)
        self.assertIsInstance(NoRoots(), FragmentClassifierProtocol)
        with _inside(self.root):
            summary = IncludeRunner(FileInclude.parse(["-s", "src"]), classifier=NoRoots()).run()
        self.assertEqual(summary.written, 0)
        self.assertFalse((self.root / "build").exists())


# --------------------------------------------------------------------------- #
#  3. Errors                                                                  #
# --------------------------------------------------------------------------- #
class ErrorTests(FileIncludeBaseTest):
    def test_missing_include_placeholder(self) -> None:
        write_tree(self.root, {"src/index.html": "<p>@@include('gone.html')</p>"})
        with self.assertLogs("fileinclude", level="ERROR") as logs:
            summary = self.run_cli(["-s", "src"])
        self.assertEqual(self.read("build/index.html"), "<p>File not found: gone.html</p>")
        self.assertEqual((summary.written, summary.errors), (1, 1))
        self.assertIn("File not found: gone.html", "\n".join(logs.output))

    def test_directory_match_aborts_scanning(self) -> None:
        build_minimal(self.root)
        (self.root / "src/aaa.html").mkdir()
        with self.assertLogs("fileinclude", level="ERROR"):
            summary = self.run_cli(["-s", "src"])
        self.assertEqual((summary.written, summary.errors), (0, 1))

    def test_write_failure_is_counted(self) -> None:
        build_minimal(self.root)
        (self.root / "blocker").write_text("not a directory", encoding="utf-8")
        with self.assertLogs("fileinclude", level="ERROR") as logs:
            summary = self.run_cli(["-s", "src", "-d", "blocker"])
        self.assertEqual((summary.written, summary.errors), (0, 1))
        self.assertIn("Cannot write file: blocker/index.html", "\n".join(logs.output))

    def test_missing_source_is_a_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli([])
        self.assertEqual(ctx.exception.code, 2)


# --------------------------------------------------------------------------- #
#  4. Entry point exit status                                                 #
# --------------------------------------------------------------------------- #
class ExitStatusTests(FileIncludeBaseTest):
    def _main(self, args: List[str]) -> int:
        with _inside(self.root), patch.object(sys, "argv", ["fileinclude", *args]):
            with self.assertRaises(SystemExit) as ctx:
                main()
        return ctx.exception.code

    def test_errors_do_not_fail_by_default(self) -> None:
        write_tree(self.root, {"src/index.html": "@@include('gone.html')"})
        self.assertEqual(self._main(["-s", "src", "--silent"]), 0)

    def test_strict_fails_on_errors(self) -> None:
        write_tree(self.root, {"src/index.html": "@@include('gone.html')"})
        self.assertEqual(self._main(["-s", "src", "--silent", "--strict"]), 1)

    def test_strict_succeeds_without_errors(self) -> None:
        build_minimal(self.root)
        self.assertEqual(self._main(["-s", "src", "--silent", "--strict"]), 0)

    def test_max_depth_below_one_is_a_usage_error(self) -> None:
        build_minimal(self.root)
        self.assertEqual(self._main(["-s", "src", "--silent", "--max-depth", "0"]), 2)


class ConsoleOutputTests(FileIncludeBaseTest):
    def setUp(self) -> None:
        super().setUp()
        self.base = logging.getLogger("fileinclude")
        self.saved = list(self.base.handlers)
        self.base.handlers.clear()

    def tearDown(self) -> None:
        self.base.handlers[:] = self.saved
        super().tearDown()

    def test_summary_on_stdout_and_errors_on_stderr(self) -> None:
        write_tree(self.root, {"src/index.html": "@@include('gone.html')"})
        out, err = io.StringIO(), io.StringIO()
        with patch.object(sys, "stdout", out), patch.object(sys, "stderr", err):
            self.run_cli(["-s", "src"])
        self.assertEqual(out.getvalue().splitlines()[0], "Files written: 1, File errors: 1")
        self.assertIn("ERROR: File not found: gone.html", err.getvalue())
        self.assertNotIn("Files written", err.getvalue())

    def test_silent_prints_nothing(self) -> None:
        build_minimal(self.root)
        out, err = io.StringIO(), io.StringIO()
        with patch.object(sys, "stdout", out), patch.object(sys, "stderr", err):
            self.run_cli(["-s", "src", "--silent"])
        self.assertEqual((out.getvalue(), err.getvalue()), ("", ""))


if __name__ == "__main__":
    unittest.main(verbosity=2)
