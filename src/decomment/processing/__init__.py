"""Public API surface for decomment.processing."""
__all__ = [
    "cleaner_registry",
    "js_scanner",
    "strategies",
    "text_ops",
]
