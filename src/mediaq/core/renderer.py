"""
CSS emission for media block trees.

Nested guards are written as nested @media rules; body text is dedented
and re-indented at the depth of its enclosing block.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterator

from mediaq.core.ir.media import MediaBlock

DEFAULT_INDENT = "  "


def render_block(block: MediaBlock | None, indent: str = DEFAULT_INDENT) -> str:
    """Render a media block tree as CSS text.

    Returns an empty string for ``None`` (nothing to emit); otherwise the
    output ends with exactly one newline.
    """
    if block is None:
        return ""
    lines = list(_render(block, 0, indent))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _render(node: MediaBlock | str, depth: int, indent: str) -> Iterator[str]:
    if isinstance(node, str):
        for line in body_lines(node):
            yield indent * depth + line if line else ""
        return

    if node.query is None:
        for child in node.children:
            yield from _render(child, depth, indent)
        return

    yield f"{indent * depth}@media {node.query} {{"
    for child in node.children:
        yield from _render(child, depth + 1, indent)
    yield f"{indent * depth}}}"


def body_lines(text: str) -> list[str]:
    """Split body text into dedented lines without surrounding blank lines."""
    dedented = textwrap.dedent(text.expandtabs(4)).strip("\n")
    return [line.rstrip() for line in dedented.splitlines()]
