"""Markdown rendering for question text shown above the grid.

Architecture note:
    Questions are displayed in a `QLabel` with rich text enabled, which
    understands a subset of HTML 4. The renderer therefore sticks to inline
    markup (emphasis, code, links) and strips the surrounding paragraph so the
    label keeps its own alignment. Raw HTML in question text is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class QuestionTextRenderer:
    """Converts question markdown into a Qt rich-text fragment."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, markdown_text: str) -> str:
        """Render markdown as HTML suitable for a rich-text label."""
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<em>No question text.</em>"
        html = self._markdown.render(sanitized).strip()
        if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
            html = html[len("<p>"):-len("</p>")]
        return html


renderer = QuestionTextRenderer()
