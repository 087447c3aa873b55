from __future__ import annotations
"""
LanguageCleanerRegistry

Map file suffixes to comment cleaners so the file processor never branches
on language itself.

The registry supports **lazy registration**: a suffix can be registered with
a builder callback that is invoked on first access.

Built-ins (see `decomment.processing.strategies`):
    - JS/TS family: lexical scanner, registered eagerly.
    - CSS, HTML-like, hash-comment, C-style and PHP: regex strategies,
      registered lazily.
    - JSON: passthrough.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from decomment.core.interfaces.cleaner import CleanerProtocol
from decomment.processing.strategies import EXTENSION_STRATEGIES, STRATEGIES, Strategy


@dataclass(frozen=True)
class _CleanerRegItem:
    cleaner: CleanerProtocol
    priority: int = 0


class LanguageCleaner(CleanerProtocol):
    def __init__(self, fn: Strategy, *, name: str = "") -> None:
        self._fn = fn
        self.name = name or getattr(fn, "__name__", "cleaner")

    def strip(self, source: str, *, filename: Optional[str] = None) -> str:
        return self._fn(source)

    def __repr__(self) -> str:
        return f"LanguageCleaner({self.name!r})"


def _normalize(suffix: str) -> str:
    sufx = suffix if suffix.startswith('.') else f'.{suffix}'
    return sufx.lower()


class LanguageCleanerRegistry:
    def __init__(self) -> None:
        self._by_suffix: Dict[str, _CleanerRegItem] = {}
        self._lazy_builders: Dict[str, tuple[Callable[[], CleanerProtocol], int]] = {}

    @classmethod
    def default(cls) -> 'LanguageCleanerRegistry':
        """Build the default registry from EXTENSION_STRATEGIES."""
        reg = cls()
        for suf, name in EXTENSION_STRATEGIES.items():
            if name == 'js':
                reg.register(suf, LanguageCleaner(STRATEGIES[name], name=name))
            else:
                reg.register_lazy(suf, builder=lambda name=name: LanguageCleaner(STRATEGIES[name], name=name))
        return reg

    def register(self, suffix: str, cleaner: CleanerProtocol, *, priority: int = 0) -> None:
        key = _normalize(suffix)
        prev = self._by_suffix.get(key)
        if prev is None or priority >= prev.priority:
            self._by_suffix[key] = _CleanerRegItem(cleaner=cleaner, priority=priority)
        self._lazy_builders.pop(key, None)

    def register_lazy(self, suffix: str, *, builder: Callable[[], CleanerProtocol], priority: int = 0) -> None:
        self._lazy_builders[_normalize(suffix)] = (builder, priority)

    def for_suffix(self, suffix: str) -> Optional[CleanerProtocol]:
        key = (suffix or '').lower()
        item = self._by_suffix.get(key)
        if item:
            return item.cleaner
        lazy = self._lazy_builders.get(key)
        if lazy:
            builder, prio = lazy
            cleaner = builder()
            self.register(key, cleaner, priority=prio)
            return cleaner
        return None

    def suffixes(self) -> list[str]:
        return sorted(set(self._by_suffix) | set(self._lazy_builders))
