"""
Badge Renderer - Builds the live preview of a disclosure badge.
"""

from transparency.engines.audit.export_controller import ExportController
from transparency.engines.render.formatting import (
    BADGE_TITLE,
    EMPTY_PLACEHOLDER,
    escape_html,
    link_html,
    tier_line,
)
from transparency.engines.validation.format_validator import is_valid_url
from transparency.schemas.disclosure import DisclosureResult, RenderedBadge


class BadgeRenderer:
    """
    Renders a DisclosureResult as escaped preview markup.

    Missing fields show a placeholder instead of failing, so the preview is
    renderable for any form state. The same render also reports whether the
    export actions should be enabled.
    """

    @classmethod
    def creator_html(cls, creator_name: str) -> str:
        return escape_html(creator_name) or EMPTY_PLACEHOLDER

    @classmethod
    def reference_html(cls, content_reference: str) -> str:
        if not is_valid_url(content_reference):
            return EMPTY_PLACEHOLDER
        return link_html(content_reference)

    @classmethod
    def render(cls, result: DisclosureResult) -> RenderedBadge:
        record = result.record
        creator = cls.creator_html(record.creator_name)
        reference = cls.reference_html(record.content_reference)
        line = tier_line(result.score, result.tier)

        html = "\n".join([
            f"<h4>{BADGE_TITLE}</h4>",
            f"<p><strong>Creator:</strong> {creator}</p>",
            f"<p><strong>URL:</strong> {reference}</p>",
            f'<p class="score">{line}</p>',
        ])

        return RenderedBadge(
            creator_html=creator,
            reference_html=reference,
            tier_line=line,
            accent_color=result.tier.color,
            export_enabled=ExportController.can_export(record),
            html=html,
        )


def render(result: DisclosureResult) -> RenderedBadge:
    """Module-level shortcut for BadgeRenderer.render."""
    return BadgeRenderer.render(result)
