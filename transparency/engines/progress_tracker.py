"""
Progress Tracker - How far the user is from an exportable disclosure.

Criteria:
- Creator name entered
- Content URL valid
- At least one stage above "none"

Progress is informational. Export only needs the first two.
"""

from transparency.engines.validation.format_validator import FormatValidator
from transparency.schemas.disclosure import CompletionProgress, DisclosureRecord


class ProgressTracker:
    """Scores form completion as a percentage with a window-title string."""

    TOOL_TITLE = "AI Transparency Disclosure Tool"
    TOTAL_CRITERIA = 3

    @classmethod
    def evaluate(cls, record: DisclosureRecord) -> CompletionProgress:
        checks = [
            FormatValidator.validate_creator_name(record.creator_name).is_valid,
            FormatValidator.validate_url(record.content_reference).is_valid,
            record.selection.has_any_usage(),
        ]
        completed = sum(1 for passed in checks if passed)
        percent = round(completed / cls.TOTAL_CRITERIA * 100)

        return CompletionProgress(
            completed=completed,
            total=cls.TOTAL_CRITERIA,
            percent=percent,
            status_title=cls.status_title(percent),
        )

    @classmethod
    def status_title(cls, percent: int) -> str:
        if percent >= 100:
            return f"{cls.TOOL_TITLE} - Ready to Export"
        return f"{cls.TOOL_TITLE} - {percent}% Complete"
