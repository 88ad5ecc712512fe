"""
Markup Encoder - Self-contained HTML snippet of the badge.

Every style is inline so the snippet renders the same when pasted into a
page that does not load our stylesheet.
"""

from transparency.engines.audit.export_controller import ExportController
from transparency.engines.render.formatting import (
    BADGE_TITLE,
    escape_html,
    link_html,
    style_to_css,
    tier_line,
)
from transparency.schemas.disclosure import DisclosureResult

CONTAINER_STYLE = {
    "padding": "20px",
    "background": "#fff",
    "border-radius": "12px",
    "box-shadow": "0 1px 3px rgba(0,0,0,0.1)",
    "font-family": "system-ui, -apple-system, sans-serif",
    "max-width": "400px",
}
HEADING_STYLE = {
    "margin": "0 0 12px 0",
    "font-size": "16px",
    "font-weight": "600",
    "color": "#333",
}
LINE_STYLE = {
    "margin": "0 0 8px 0",
    "font-size": "14px",
    "color": "#555",
}
LINK_STYLE = {
    "color": "#2180d8",
    "text-decoration": "none",
}
SCORE_STYLE = {
    "margin": "0",
    "font-size": "18px",
    "font-weight": "700",
    "color": "#333",
}


class MarkupEncoder:
    """Encodes a DisclosureResult as an embeddable, inline-styled <div>."""

    @classmethod
    def container_style(cls, accent_color: str) -> str:
        return style_to_css({"border-left": f"6px solid {accent_color}", **CONTAINER_STYLE})

    @classmethod
    def encode(cls, result: DisclosureResult) -> str:
        """
        Build the snippet.

        Raises:
            ExportNotAllowedError: if the record fails the export gate
        """
        record = result.record
        ExportController.require_exportable(record)

        line_css = style_to_css(LINE_STYLE)
        return "\n".join([
            f'<div class="ai-transparency-badge" style="{cls.container_style(result.tier.color)}" '
            f'data-score="{result.score}">',
            f'  <h3 style="{style_to_css(HEADING_STYLE)}">{BADGE_TITLE}</h3>',
            f'  <p style="{line_css}"><strong>Creator:</strong> {escape_html(record.creator_name)}</p>',
            f'  <p style="{line_css}"><strong>URL:</strong> '
            f"{link_html(record.content_reference, LINK_STYLE)}</p>",
            f'  <p style="{style_to_css(SCORE_STYLE)}" class="score">'
            f"{tier_line(result.score, result.tier)}</p>",
            "</div>",
        ])


def encode_markup(result: DisclosureResult) -> str:
    """Module-level shortcut for MarkupEncoder.encode."""
    return MarkupEncoder.encode(result)
