"""Render k6 markdown/MDX document bodies into HTML.

The k6 sources are MDX: fenced code is often wrapped in
``<CodeGroup labels={["script.js", "output"]}>`` blocks, fences may mark
highlighted lines as ``javascript{1,4-6}``, and layout components such as
``<Collapsible>`` sit on lines of their own. Python-Markdown understands none
of that, so bodies are rewritten into plain fenced markdown first and the
highlighted blocks are tagged with their language and group label afterwards.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FENCE_OPEN_PATTERN = re.compile(
    r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})(?P<language>[A-Za-z0-9_+#.-]*)(?P<extras>.*)$"
)
HIGHLIGHT_PATTERN = re.compile(r"\{(?P<ranges>[\d,\s-]+)\}")
CODE_GROUP_OPEN_PATTERN = re.compile(r"^[ \t]*<CodeGroup\b(?P<attrs>[^\n>]*)>[ \t]*$")
CODE_GROUP_CLOSE_PATTERN = re.compile(r"^[ \t]*</CodeGroup>[ \t]*$")
GROUP_LABELS_PATTERN = re.compile(r"labels=\{\[(?P<labels>.*?)\]\}")
QUOTED_PATTERN = re.compile(r"""["']([^"']*)["']""")
# MDX layout components (``<Collapsible title="...">``) on lines of their own.
MDX_COMPONENT_LINE_PATTERN = re.compile(
    r"^[ \t]*</?[A-Z][A-Za-z0-9.]*(?:\s[^\n>]*)?/?>[ \t]*$"
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


@dc.dataclass(frozen=True, slots=True)
class FenceInfo:
    """Metadata of one fenced block, in document order."""

    language: str
    label: str | None = None
    highlight: tuple[int, ...] = ()


def parse_group_labels(attrs: str) -> list[str]:
    """Return the tab labels declared on a ``<CodeGroup>`` tag."""
    match = GROUP_LABELS_PATTERN.search(attrs)
    if match is None:
        return []
    return QUOTED_PATTERN.findall(match.group("labels"))


def parse_highlight_lines(extras: str) -> tuple[int, ...]:
    """Expand a ``{1,4-6}`` line marker into ``(1, 4, 5, 6)``."""
    match = HIGHLIGHT_PATTERN.search(extras)
    if match is None:
        return ()
    lines: list[int] = []
    for part in match.group("ranges").split(","):
        start, _sep, end = part.strip().partition("-")
        if not start.isdigit():
            continue
        last = int(end) if end.isdigit() else int(start)
        lines.extend(range(int(start), max(int(start), last) + 1))
    return tuple(dict.fromkeys(lines))


class HtmlContentRenderer:
    """Render k6 document bodies with Python-Markdown and Pygments."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with the Pygments style used for code blocks.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render a markdown or MDX body into HTML.

        Code blocks come out as ``<div class="codehilite">`` carrying a
        ``data-language`` attribute and, inside a ``<CodeGroup>``, a
        ``data-label`` with the matching tab label.
        """
        normalized, fences = self.prepare(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return self._annotate_codehilite(md.convert(normalized), fences)

    def prepare(self, text: str) -> tuple[str, list[FenceInfo]]:
        """Rewrite an MDX body into plain fenced markdown.

        Returns
        -------
        tuple[str, list[FenceInfo]]
            The markdown handed to Python-Markdown and one entry per fenced
            block in the order the blocks appear.
        """
        lines: list[str] = []
        fences: list[FenceInfo] = []
        labels: list[str] | None = None
        open_fence: str | None = None
        for line in text.splitlines():
            if open_fence is not None:
                if self._closes(line, open_fence):
                    lines.append(open_fence)
                    open_fence = None
                else:
                    lines.append(line)
                continue

            if group := CODE_GROUP_OPEN_PATTERN.match(line):
                labels = parse_group_labels(group.group("attrs"))
                continue
            if CODE_GROUP_CLOSE_PATTERN.match(line):
                labels = None
                continue
            if MDX_COMPONENT_LINE_PATTERN.match(line):
                continue

            fence = FENCE_OPEN_PATTERN.match(line)
            if fence is None:
                lines.append(line)
                continue
            label = labels.pop(0) if labels else None
            info = FenceInfo(
                language=fence.group("language") or "text",
                label=label,
                highlight=parse_highlight_lines(fence.group("extras")),
            )
            fences.append(info)
            open_fence = fence.group("fence")
            lines.append(self._fence_line(open_fence, fence.group("language"), info))
        return "\n".join(lines) + "\n", fences

    @staticmethod
    def _closes(line: str, fence: str) -> bool:
        stripped = line.strip()
        return (
            len(stripped) >= len(fence)
            and set(stripped) == {fence[0]}
            and len(line) - len(line.lstrip(" ")) <= 3
        )

    @staticmethod
    def _fence_line(fence: str, language: str, info: FenceInfo) -> str:
        if not info.highlight:
            return f"{fence}{language}"
        hl_lines = " ".join(str(number) for number in info.highlight)
        return f'{fence}{language} hl_lines="{hl_lines}"'

    @staticmethod
    def _annotate_codehilite(html: str, fences: cabc.Sequence[FenceInfo]) -> str:
        """Attach language and group label metadata to each highlighted block."""
        if not fences:
            return html
        remaining = iter(fences)

        def _repl(match: re.Match[str]) -> str:
            info = next(remaining, FenceInfo(language="text"))
            attrs = f' data-language="{escape(info.language, quote=True)}"'
            if info.label:
                attrs += f' data-label="{escape(info.label, quote=True)}"'
            return f'<div class="codehilite"{attrs}>'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(fences))


__all__ = [
    "FenceInfo",
    "HtmlContentRenderer",
    "parse_group_labels",
    "parse_highlight_lines",
]
