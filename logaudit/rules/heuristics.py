"""Textual heuristics shared by the rules.

These classify argument text by substring and letter case only. They are
best-effort: a variable called ``settings`` looks like a collection and an
object called ``payload`` does not. Expect false positives and negatives.
"""

from __future__ import annotations

__all__ = ["looks_like_complete_object", "has_placeholder", "mentions_exception"]

_COLLECTION_HINTS: tuple[str, ...] = ("list", "map", "set", "[")
_SCALAR_HINTS: tuple[str, ...] = ("message", "name", "data", "id", "key", "value", "string")
_PLACEHOLDERS: tuple[str, ...] = ("{}", "%s", "${")


def looks_like_complete_object(text: str) -> bool:
    """Guess whether an argument expression dumps a whole object or collection."""
    lowered = text.lower()
    suspicious = any(h in lowered for h in _COLLECTION_HINTS) or any(c.isupper() for c in text)
    if not suspicious:
        return False
    return not any(h in lowered for h in _SCALAR_HINTS)


def has_placeholder(message: str) -> bool:
    return any(p in message for p in _PLACEHOLDERS)


def mentions_exception(text: str) -> bool:
    return "Exception" in text
