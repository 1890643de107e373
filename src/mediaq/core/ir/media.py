"""
Media block tree produced by combining conditions.

    MediaBlock(query="(min-width: 769px)", children=[
        MediaBlock(query="(orientation: landscape)", children=[".a { color: red; }"]),
    ])

renders as two nested @media guards around the body.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MediaBlock(BaseModel):
    """
    A guarded (or unguarded) block of stylesheet content.

    A block with ``query=None`` is emitted unconditionally; otherwise it is
    wrapped in ``@media <query> { ... }``. Children are either raw body
    text or nested blocks.
    """

    query: str | None = Field(default=None, description="Media query guard, None for none")
    children: list[MediaBlock | str] = Field(default_factory=list, description="Nested content")

    model_config = ConfigDict(frozen=True)

    @property
    def is_guarded(self) -> bool:
        return self.query is not None

    @property
    def queries(self) -> list[str]:
        """Guards from the outermost block down the first nested chain."""
        result: list[str] = []
        node: MediaBlock | None = self
        while node is not None:
            if node.query is not None:
                result.append(node.query)
            nested = [c for c in node.children if isinstance(c, MediaBlock)]
            node = nested[0] if len(nested) == 1 else None
        return result

    @property
    def depth(self) -> int:
        """Number of nested @media guards."""
        return len(self.queries)

    def __str__(self) -> str:
        if self.query is None:
            return " ".join(str(c) for c in self.children)
        inner = " ".join(str(c) for c in self.children)
        return f"@media {self.query} {{ {inner} }}"


MediaBlock.model_rebuild()
