"""Context templates — render a snippet for inclusion in a prompt.

Markdown files are quoted as prose; everything else is fenced as code.
"""

from __future__ import annotations

import posixpath
from typing import Callable

ContextTemplate = Callable[[str, str], str]

MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({"md", "markdown"})


def get_extension(file_path: str) -> str:
    """Return the extension of *file_path* without its dot (``""`` if none).

    Dot-files such as ``.md`` have no extension.
    """
    return posixpath.splitext(file_path)[1][1:]


def is_markdown_file(file_path: str) -> bool:
    """Case-sensitive check for ``.md`` / ``.markdown`` files."""
    return get_extension(file_path) in MARKDOWN_EXTENSIONS


def populate_code_context_template(code: str, file_path: str) -> str:
    language = get_extension(file_path)
    return f"Use following code snippet from file `{file_path}`:\n```{language}\n{code}\n```"


def populate_markdown_context_template(text: str, file_path: str) -> str:
    return f"Use the following text from file `{file_path}`:\n{text}"


def select_context_template(file_path: str) -> ContextTemplate:
    """Pick the template matching the file type of *file_path*."""
    if is_markdown_file(file_path):
        return populate_markdown_context_template
    return populate_code_context_template
