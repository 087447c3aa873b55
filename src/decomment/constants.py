from __future__ import annotations

"""Project-wide defaults used by the CLI parser and the walker."""

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    'node_modules',
    '.git',
    'dist',
    'build',
    'coverage',
    '.vscode',
    '.idea',
)

DEFAULT_EXCLUDE_FILES: tuple[str, ...] = (
    'package-lock.json',
    '*.log',
    '*.min.js',
    '*.min.css',
    '*.map',
)

# Web languages first, then a few others. Given without the leading dot.
DEFAULT_EXTENSIONS: tuple[str, ...] = (
    'js', 'jsx', 'ts', 'tsx', 'mjs', 'cjs',
    'css', 'scss', 'less',
    'html', 'vue', 'svelte',
    'json', 'md', 'yaml', 'yml',
    'py', 'java', 'cs', 'php', 'rb', 'go', 'swift', 'kt',
)

GITIGNORE_NAME: str = '.gitignore'
