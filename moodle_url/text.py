"""Small text helpers used by the URL functions."""

from typing import Optional


def remove_ending_slash(text: Optional[str]) -> str:
    """Remove one trailing slash, if any. Empty or missing text gives ''."""
    if not text:
        return ''

    if text[-1] == '/':
        return text[:-1]

    return text


def remove_starting_slash(text: Optional[str]) -> str:
    """Remove one leading slash, if any. Empty or missing text gives ''."""
    if not text:
        return ''

    if text[0] == '/':
        return text[1:]

    return text
