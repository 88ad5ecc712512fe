"""
Render Engine - Shared escaping and the live badge preview.
"""

from transparency.engines.render.formatting import (
    escape_html,
    tier_line,
    style_to_css,
)
from transparency.engines.render.badge_renderer import (
    BadgeRenderer,
    render,
)

__all__ = [
    "escape_html",
    "tier_line",
    "style_to_css",
    "BadgeRenderer",
    "render",
]
