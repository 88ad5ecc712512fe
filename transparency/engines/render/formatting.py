"""
Shared escaping and formatting for the live badge and every export.

The preview and the exporters must produce identical text for the same
record, so all of them go through these helpers.
"""

from html import escape
from typing import Mapping, Optional

from transparency.schemas.disclosure import Tier

BADGE_TITLE = "AI Transparency Disclosure"
EMPTY_PLACEHOLDER = "<em>—</em>"


def escape_html(text: Optional[str]) -> str:
    """Escape user text for interpolation into markup (quotes included)."""
    if not text:
        return ""
    return escape(text, quote=True)


def href_attr(url: str) -> str:
    """Use a validated URL as an href target; only the attribute quote is neutralised."""
    return url.replace('"', "&quot;")


def tier_line(score: int, tier: Tier) -> str:
    """'<glyph> <score>% – <label>', shared by the preview and the exports."""
    return f"{tier.glyph} {score}% – {tier.label}"


def style_to_css(style: Mapping[str, object]) -> str:
    """Inline CSS from an ordered {property: value} mapping."""
    parts = []
    for prop, value in style.items():
        if value is None or value is False:
            continue
        text = str(value).strip()
        if text:
            parts.append(f"{prop}: {text}")
    if not parts:
        return ""
    return "; ".join(parts) + ";"


def link_html(url: str, style: Optional[Mapping[str, object]] = None) -> str:
    """Anchor for a validated URL, escaped for display and opened in a new tab."""
    style_attr = ""
    css = style_to_css(style or {})
    if css:
        style_attr = f' style="{css}"'
    return (
        f'<a href="{href_attr(url)}" target="_blank" rel="noopener noreferrer"{style_attr}>'
        f"{escape_html(url)}</a>"
    )
