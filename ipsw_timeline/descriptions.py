from __future__ import annotations

import html


_RELEASED_PHRASE = "has been released"


def strip_tags(text: str) -> str:
    """
    Drop everything between "<" and ">".

    This is a naive scanner: it knows nothing about nesting or quoted
    attributes, so a ">" inside an attribute value ends the tag early.
    Angle brackets themselves are never emitted.
    """
    out = []
    in_tag = False
    for ch in text:
        if ch == "<":
            in_tag = True
        elif ch == ">":
            in_tag = False
        elif not in_tag:
            out.append(ch)
    return "".join(out)


def normalize_space(text: str) -> str:
    return " ".join(text.split())


def clean_description(raw: str) -> str:
    """Strip markup, decode entities and collapse whitespace."""
    if not raw:
        return ""
    return normalize_space(html.unescape(strip_tags(raw)))


def notes_from_description(description: str) -> str:
    """
    Return the text following "has been released", or "" when absent.

    The full stop closing the "... has been released." sentence is not part of
    the notes.
    """
    idx = description.lower().find(_RELEASED_PHRASE)
    if idx < 0:
        return ""
    after = description[idx + len(_RELEASED_PHRASE):].strip()
    if after.startswith("."):
        after = after[1:]
    return normalize_space(after)
