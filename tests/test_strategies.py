from __future__ import annotations

import unittest

from decomment.core.interfaces import CleanerProtocol
from decomment.processing.cleaner_registry import LanguageCleaner, LanguageCleanerRegistry
from decomment.processing.js_scanner import strip_js_comments
from decomment.processing.strategies import (
    EXTENSION_STRATEGIES,
    STRATEGIES,
    strategy_for_extension,
    strip_c_style_comments,
    strip_css_comments,
    strip_hash_comments,
    strip_html_comments,
    strip_php_comments,
)


class RegexStrategyTests(unittest.TestCase):
    def test_css_block_comments(self) -> None:
        src = "/* header */\nbody { color: red; /* inline */ }\n/* multi\nline */"
        self.assertEqual(strip_css_comments(src), "\nbody { color: red;  }\n")

    def test_html_comments(self) -> None:
        src = "<div><!-- hi --></div>\n<!--\nblock\n-->\n<p>x</p>"
        self.assertEqual(strip_html_comments(src), "<div></div>\n\n<p>x</p>")

    def test_hash_comments(self) -> None:
        src = "# title\nkey: value  # note\r\nother: 1\n"
        self.assertEqual(strip_hash_comments(src), "\nkey: value  \r\nother: 1\n")

    def test_c_style_comments(self) -> None:
        src = "int a = 1; // one\n/* two */ int b = 2;\n"
        self.assertEqual(strip_c_style_comments(src), "int a = 1; \n int b = 2;\n")

    def test_php_handles_all_three_forms(self) -> None:
        src = "<?php\n# hash\n$a = 1; // slash\n/* block */ echo $a;\n"
        self.assertEqual(strip_php_comments(src), "<?php\n\n$a = 1; \n echo $a;\n")


class StrategyMappingTests(unittest.TestCase):
    def test_js_family_uses_the_scanner(self) -> None:
        for ext in (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"):
            self.assertIs(strategy_for_extension(ext), strip_js_comments, ext)

    def test_lookup_is_case_insensitive(self) -> None:
        self.assertIs(strategy_for_extension(".CSS"), strip_css_comments)
        self.assertIs(strategy_for_extension(".Vue"), strip_html_comments)

    def test_json_passes_through(self) -> None:
        src = '{"url": "http://x/*y*/"} // not valid json anyway'
        self.assertEqual(strategy_for_extension(".json")(src), src)

    def test_unknown_extension(self) -> None:
        self.assertIsNone(strategy_for_extension(".txt"))
        self.assertIsNone(strategy_for_extension(""))

    def test_every_mapping_points_to_a_strategy(self) -> None:
        for ext, name in EXTENSION_STRATEGIES.items():
            self.assertIn(name, STRATEGIES, ext)


class CleanerRegistryTests(unittest.TestCase):
    def test_default_registry_resolves_lazily(self) -> None:
        reg = LanguageCleanerRegistry.default()
        cleaner = reg.for_suffix(".scss")
        self.assertIsInstance(cleaner, CleanerProtocol)
        self.assertIs(reg.for_suffix(".scss"), cleaner)
        self.assertEqual(cleaner.strip("a{}/* c */"), "a{}")

    def test_default_registry_covers_all_extensions(self) -> None:
        reg = LanguageCleanerRegistry.default()
        self.assertEqual(reg.suffixes(), sorted(EXTENSION_STRATEGIES))

    def test_js_cleaner(self) -> None:
        cleaner = LanguageCleanerRegistry.default().for_suffix(".TS")
        self.assertEqual(cleaner.strip("let a = 1; // c", filename="a.ts"), "let a = 1; ")

    def test_unknown_suffix(self) -> None:
        self.assertIsNone(LanguageCleanerRegistry.default().for_suffix(".txt"))

    def test_priority_and_normalization(self) -> None:
        reg = LanguageCleanerRegistry()
        upper = LanguageCleaner(str.upper, name="upper")
        lower = LanguageCleaner(str.lower, name="lower")
        reg.register("txt", upper, priority=5)
        reg.register(".TXT", lower, priority=1)
        self.assertIs(reg.for_suffix(".txt"), upper)
        reg.register(".txt", lower, priority=5)
        self.assertIs(reg.for_suffix(".txt"), lower)

    def test_eager_registration_drops_lazy_builder(self) -> None:
        reg = LanguageCleanerRegistry()
        calls = []

        def builder() -> LanguageCleaner:
            calls.append(1)
            return LanguageCleaner(str.upper)

        reg.register_lazy(".x", builder=builder)
        reg.register(".x", LanguageCleaner(str.lower))
        self.assertEqual(reg.for_suffix(".x").strip("AbC"), "abc")
        self.assertEqual(calls, [])


if __name__ == "__main__":
    unittest.main()
