"""Title Enforcement — the one input rule the write group applies.

Invariants:
    - normalize_title is PURE: returns the stripped title or raises, no side effects
    - Empty and whitespace-only titles are rejected
    - Titles longer than max_length (after stripping) are rejected
    - DEFAULT_MAX_TITLE_LENGTH is the fallback when settings don't override it
"""

from todo_graph.core.errors import ErrorContext, TitleValidationError


DEFAULT_MAX_TITLE_LENGTH: int = 500


def normalize_title(
    title: str, max_length: int = DEFAULT_MAX_TITLE_LENGTH,
) -> str:
    """Strip surrounding whitespace and enforce non-empty, bounded length."""
    stripped = title.strip()
    ctx = ErrorContext(operation="create_todo")
    if not stripped:
        raise TitleValidationError(
            "title cannot be empty or whitespace", context=ctx,
        )
    if len(stripped) > max_length:
        raise TitleValidationError(
            f"title exceeds {max_length} characters", context=ctx,
        )
    return stripped
