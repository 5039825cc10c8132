"""Chatbot presenter: turns a validation verdict into display lines."""

from core.models import ValidationResult

VALID_LINES = [
    "🤖 Wonderful! Your pet listing has passed all our checks!",
    "🌟 Your furry friend is ready to find their perfect match!",
]
GREETING = "🤖 Hi there! I've reviewed your pet listing and found a few things we can improve:"
SUGGESTIONS_HEADER = "💡 Here are some helpful suggestions:"


def present(result: ValidationResult) -> list[str]:
    """
    Display lines for a verdict, in order. Empty strings are spacers.

    A valid listing gets the two opening lines only; its suggestions are
    left to the caller.
    """
    if result.is_valid:
        return list(VALID_LINES)

    lines = [GREETING, ""]
    lines.extend(result.messages)
    if result.suggestions:
        lines.append("")
        lines.append(SUGGESTIONS_HEADER)
        lines.extend(result.suggestions)
    return lines


get_chatbot_response = present
