"""
Stylesheet preprocessor for media directives.

Expands two directives anywhere in CSS/SCSS text, including inside
selectors; everything else is passed through verbatim.

Directive syntax::

    .nav {
      @include media(">=tablet", "<desktop") {
        display: flex;
      }
    }

    @include media-context((tablet: 900px), (hover: "(hover: hover)")) {
      .card {
        @include media(">=tablet", "hover") { padding: 2rem; }
      }
    }

``media`` wraps its body in one @media rule per condition (or applies the
static fallback when media queries are unsupported). ``media-context``
emits its body unwrapped, resolved against a tweaked vocabulary.
Directives inside strings, `/* */` comments and SCSS `//` line comments
are left alone.

Entry point:
    ``process_stylesheet(source, context, diagnostics) -> str``
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from mediaq.core.diagnostics import Diagnostics
from mediaq.core.errors import StylesheetError, make_stylesheet_error
from mediaq.core.ir.context import ResolutionContext
from mediaq.core.media_expr.combiner import combine
from mediaq.core.renderer import DEFAULT_INDENT, body_lines, render_block

logger = logging.getLogger(__name__)

# ``@include media(`` or ``@include media-context(``
_DIRECTIVE = re.compile(r"@include\s+(media-context|media)\s*\(")

_QUOTES = ("'", '"')


def process_stylesheet(
    source: str,
    context: ResolutionContext | None = None,
    diagnostics: Diagnostics | None = None,
    *,
    file: Path | None = None,
    indent: str = DEFAULT_INDENT,
) -> str:
    """Expand media directives in a stylesheet.

    Args:
        source: Stylesheet text.
        context: Resolution context (defaults when omitted).
        diagnostics: Error policy; raising by default.
        file: Source path, used in error locations.
        indent: Indentation unit for generated nesting.

    Returns:
        The stylesheet with every directive expanded.

    Raises:
        StylesheetError: On unbalanced braces, unterminated strings or
            comments, regardless of the error policy.
        MediaQueryError: On directive errors under the ``raise`` policy.
    """
    expander = _Expander(source, diagnostics or Diagnostics(), file, indent)
    return expander.expand(0, len(source), context or ResolutionContext())


def process_file(
    path: Path,
    context: ResolutionContext | None = None,
    diagnostics: Diagnostics | None = None,
    *,
    indent: str = DEFAULT_INDENT,
) -> str:
    """Read a stylesheet from disk and expand its directives."""
    source = path.read_text(encoding="utf-8")
    return process_stylesheet(source, context, diagnostics, file=path, indent=indent)


class _Expander:
    """Directive expansion over one source text, tracking absolute offsets."""

    def __init__(
        self,
        text: str,
        diagnostics: Diagnostics,
        file: Path | None,
        indent: str,
    ) -> None:
        self.text = text
        self.diagnostics = diagnostics
        self.file = file
        self.indent = indent

    def expand(self, start: int, end: int, context: ResolutionContext) -> str:
        """Expand directives in text[start:end]."""
        out: list[str] = []
        chunk_start = start
        pos = start
        while pos < end:
            if self._at_comment(pos, end):
                pos = self._skip_comment(pos, end)
                continue
            char = self.text[pos]
            if char in _QUOTES:
                pos = self._skip_string(pos, end)
                continue
            if char == "@":
                m = _DIRECTIVE.match(self.text, pos, end)
                if m:
                    out.append(self.text[chunk_start:pos])
                    replacement, pos = self._expand_directive(m, end, context)
                    out.append(replacement)
                    chunk_start = pos
                    continue
            pos += 1
        out.append(self.text[chunk_start:end])
        return "".join(out)

    # -- Directives --

    def _expand_directive(
        self,
        m: re.Match[str],
        end: int,
        context: ResolutionContext,
    ) -> tuple[str, int]:
        name = m.group(1)
        args_open = m.end() - 1
        args_close = self._find_closing(args_open, end, "(", ")")
        brace = self._skip_whitespace(args_close + 1, end)
        if brace >= end or self.text[brace] != "{":
            raise self._error(
                f"Expected `{{` after @include {name}(...)", brace, structural=True
            )
        body_close = self._find_closing(brace, end, "{", "}")
        directive_end = body_close + 1
        args_start = args_open + 1

        css = ""
        with self.diagnostics.guard() as outcome:
            if name == "media":
                conditions = self._parse_conditions(args_start, args_close)
                body = self.expand(brace + 1, body_close, context)
                css = render_block(combine(conditions, body, context), indent=self.indent)
            else:
                breakpoints, expressions = self._parse_context_args(args_start, args_close)
                tweaked = context.tweaked(breakpoints, expressions)
                body = self.expand(brace + 1, body_close, tweaked)
                css = "\n".join(body_lines(body))

        if outcome.aborted:
            logger.debug("Dropped @include %s at offset %d", name, m.start())
            return "", directive_end
        return self._reindent(css, self._line_indent(m.start())), directive_end

    def _parse_conditions(self, start: int, end: int) -> list[str]:
        """Parse ``"cond", "cond", ...`` into a list of conditions."""
        segments = self._split_top_level(start, end, ",")
        if len(segments) == 1 and not self.text[segments[0][0] : segments[0][1]].strip():
            return []
        return [self._unquote(seg_start, seg_end) for seg_start, seg_end in segments]

    def _parse_context_args(
        self,
        start: int,
        end: int,
    ) -> tuple[dict[str, str], dict[str, str]]:
        """Parse up to two maps: breakpoint overrides, then expression overrides."""
        segments = self._split_top_level(start, end, ",")
        if len(segments) > 2:
            raise self._error("media-context takes at most two maps", segments[2][0])
        maps = [self._parse_map(seg_start, seg_end) for seg_start, seg_end in segments]
        while len(maps) < 2:
            maps.append({})
        return maps[0], maps[1]

    def _parse_map(self, start: int, end: int) -> dict[str, str]:
        """Parse ``(name: value, ...)``; an empty segment is an empty map."""
        start = self._skip_whitespace(start, end)
        while end > start and self.text[end - 1].isspace():
            end -= 1
        if start == end:
            return {}
        if self.text[start] != "(" or self.text[end - 1] != ")":
            raise self._error("Expected a map like `(name: value)`", start)

        result: dict[str, str] = {}
        for entry_start, entry_end in self._split_top_level(start + 1, end - 1, ","):
            if not self.text[entry_start:entry_end].strip():
                continue
            parts = self._split_top_level(entry_start, entry_end, ":", maxsplit=1)
            if len(parts) != 2:
                raise self._error("Expected `name: value` in map", entry_start)
            key = self._unquote(*parts[0])
            result[key] = self._unquote(*parts[1])
        return result

    # -- Scanning helpers --

    def _split_top_level(
        self,
        start: int,
        end: int,
        separator: str,
        maxsplit: int = -1,
    ) -> list[tuple[int, int]]:
        """Split text[start:end] on separators outside strings and parentheses."""
        segments: list[tuple[int, int]] = []
        depth = 0
        seg_start = start
        pos = start
        while pos < end:
            if self._at_comment(pos, end):
                pos = self._skip_comment(pos, end)
                continue
            char = self.text[pos]
            if char in _QUOTES:
                pos = self._skip_string(pos, end)
                continue
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
            elif char == separator and depth == 0 and maxsplit != len(segments):
                segments.append((seg_start, pos))
                seg_start = pos + 1
            pos += 1
        segments.append((seg_start, end))
        return segments

    def _unquote(self, start: int, end: int) -> str:
        """Strip whitespace and one pair of matching quotes."""
        raw = self.text[start:end]
        value = raw.strip()
        if not value:
            raise self._error("Expected a value", start)
        if value[0] in _QUOTES:
            if len(value) < 2 or value[-1] != value[0]:
                raise self._error(
                    "Unterminated string", start + raw.index(value[0]), structural=True
                )
            return value[1:-1].replace("\\" + value[0], value[0])
        return value

    def _find_closing(self, open_pos: int, end: int, opener: str, closer: str) -> int:
        """Offset of the bracket matching the one at open_pos."""
        depth = 0
        pos = open_pos
        while pos < end:
            if self._at_comment(pos, end):
                pos = self._skip_comment(pos, end)
                continue
            char = self.text[pos]
            if char in _QUOTES:
                pos = self._skip_string(pos, end)
                continue
            if char == opener:
                depth += 1
            elif char == closer:
                depth -= 1
                if depth == 0:
                    return pos
            pos += 1
        raise self._error(f"Unbalanced `{opener}`", open_pos, structural=True)

    def _skip_string(self, start: int, end: int) -> int:
        quote = self.text[start]
        pos = start + 1
        while pos < end:
            char = self.text[pos]
            if char == "\\":
                pos += 2
                continue
            if char == quote:
                return pos + 1
            if char == "\n":
                break
            pos += 1
        raise self._error("Unterminated string", start, structural=True)

    def _at_comment(self, pos: int, end: int) -> bool:
        if self.text.startswith("/*", pos, end):
            return True
        # "//" right after ":" or "(" belongs to a URL such as url(http://...)
        return self.text.startswith("//", pos, end) and (
            pos == 0 or self.text[pos - 1] not in ":("
        )

    def _skip_comment(self, start: int, end: int) -> int:
        if self.text.startswith("//", start, end):
            newline = self.text.find("\n", start, end)
            return end if newline == -1 else newline
        close = self.text.find("*/", start + 2, end)
        if close == -1:
            raise self._error("Unterminated comment", start, structural=True)
        return close + 2

    def _skip_whitespace(self, pos: int, end: int) -> int:
        while pos < end and self.text[pos].isspace():
            pos += 1
        return pos

    def _line_indent(self, pos: int) -> str:
        line_start = self.text.rfind("\n", 0, pos) + 1
        prefix = self.text[line_start:pos]
        return prefix[: len(prefix) - len(prefix.lstrip())]

    def _reindent(self, css: str, lead: str) -> str:
        lines = css.splitlines()
        if not lines:
            return ""
        rest = [lead + line if line else "" for line in lines[1:]]
        return "\n".join([lines[0], *rest])

    def _error(self, message: str, offset: int, *, structural: bool = False) -> StylesheetError:
        return make_stylesheet_error(
            message,
            self.text,
            min(offset, len(self.text)),
            self.file,
            structural=structural,
        )
