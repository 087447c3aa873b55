from __future__ import annotations

from decomment.cli import Decomment, main
from decomment.core.report import RunReport
from decomment.io.file_processor import FileProcessor
from decomment.io.walker import TreeWalker
from decomment.processing.cleaner_registry import LanguageCleaner, LanguageCleanerRegistry
from decomment.processing.js_scanner import ScanState, strip_js_comments
from decomment.processing.strategies import strategy_for_extension
from decomment.processing.text_ops import collapse_blank_lines

__version__ = '1.2.0'

__all__ = [
    'Decomment',
    'main',
    'RunReport',
    'FileProcessor',
    'TreeWalker',
    'LanguageCleaner',
    'LanguageCleanerRegistry',
    'ScanState',
    'strip_js_comments',
    'strategy_for_extension',
    'collapse_blank_lines',
]
