from __future__ import annotations

import logging
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from decomment.constants import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXCLUDE_FILES
from decomment.core.interfaces import WalkerProtocol
from decomment.io.walker import TreeWalker, build_ignore_spec

BUILD_SCRIPT = Path(__file__).resolve().parent / "tools" / "build_fixtures.py"


class _Capture(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages: list[tuple[int, str]] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append((record.levelno, record.getMessage()))


class WalkerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "project"
        subprocess.check_call([sys.executable, str(BUILD_SCRIPT), str(self.root)], stdout=subprocess.DEVNULL)
        self.log = logging.getLogger("decomment.tests.walker")
        self.log.setLevel(logging.DEBUG)
        self.log.propagate = False
        self.capture = _Capture()
        self.log.addHandler(self.capture)

    def tearDown(self) -> None:
        self.log.removeHandler(self.capture)
        self._tmp.cleanup()

    def _walker(self, **kw) -> TreeWalker:
        kw.setdefault("exclude_dirs", DEFAULT_EXCLUDE_DIRS)
        kw.setdefault("exclude_files", DEFAULT_EXCLUDE_FILES)
        return TreeWalker(self.root, logger=self.log, **kw)

    def _rel(self, walker: TreeWalker) -> list[str]:
        return [p.relative_to(self.root).as_posix() for p in walker.iter_files()]

    def test_default_rules_and_gitignore(self) -> None:
        walker = self._walker()
        self.assertIsInstance(walker, WalkerProtocol)
        self.assertTrue(walker.gitignore_loaded)
        self.assertEqual(
            self._rel(walker),
            [
                ".gitignore",
                "src/app.js",
                "src/clean.js",
                "src/data.json",
                "src/notes.txt",
                "src/page.html",
                "src/tool.py",
                "src/util.ts",
                "src/styles/site.css",
            ],
        )

    def test_without_gitignore(self) -> None:
        walker = self._walker(use_gitignore=False)
        self.assertFalse(walker.gitignore_loaded)
        self.assertIn("generated/out.js", self._rel(walker))

    def test_excluded_names_beat_gitignore_negation(self) -> None:
        (self.root / ".gitignore").write_text("!node_modules/\n", encoding="utf-8")
        files = self._rel(self._walker())
        self.assertFalse(any(f.startswith("node_modules/") for f in files))

    def test_verbose_reports_ignored_paths_at_info(self) -> None:
        list(self._walker(verbose=True).iter_files())
        infos = [m for lvl, m in self.capture.messages if lvl == logging.INFO]
        self.assertIn("-- ignored (rule): node_modules/", infos)
        self.assertIn("-- ignored (rule): src/app.min.js", infos)

    def test_quiet_reports_ignored_paths_at_debug(self) -> None:
        list(self._walker().iter_files())
        self.assertFalse([m for lvl, m in self.capture.messages if lvl == logging.INFO])
        self.assertTrue([m for lvl, m in self.capture.messages if lvl == logging.DEBUG])


class IgnoreSpecTests(unittest.TestCase):
    def test_directory_names_match_at_any_depth(self) -> None:
        spec = build_ignore_spec(["dist"], [])
        self.assertTrue(spec.match_file("dist/"))
        self.assertTrue(spec.match_file("packages/a/dist/"))
        self.assertTrue(spec.match_file("packages/a/dist/bundle.js"))
        self.assertFalse(spec.match_file("src/distance.js"))

    def test_file_globs(self) -> None:
        spec = build_ignore_spec([], ["*.min.js", "package-lock.json"])
        self.assertTrue(spec.match_file("vendor/jquery.min.js"))
        self.assertTrue(spec.match_file("package-lock.json"))
        self.assertFalse(spec.match_file("src/main.js"))


if __name__ == "__main__":
    unittest.main()
