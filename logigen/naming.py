"""Identifier derivation from a single free-text base name.

A base name such as ``"blog post"``, ``"blog_post"``, ``"blog-post"`` or
``"BlogPost"`` is split into words once and re-joined into the conventions
used by the templates: ``BlogPost``, ``blogPost``, ``blog-post``.  The plural
form is computed from the *original* text so that separators and casing the
user typed are kept (``"blog post"`` -> ``"blog posts"``).
"""

from __future__ import annotations

import re

from .errors import InvalidNameError
from .models import DerivedNames


# ---------------------------------------------------------------------------
# Word splitting
# ---------------------------------------------------------------------------

def split_words(value: str) -> list[str]:
    """Split *value* on separators and case boundaries into lowercase words.

    Examples::

        split_words("user profile")  -> ["user", "profile"]
        split_words("userProfile")   -> ["user", "profile"]
        split_words("HTMLParser")    -> ["html", "parser"]
    """
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1 \2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", s1)
    return [word.lower() for word in re.split(r"[\W_]+", s2) if word]


def to_pascal(value: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some thing`` to ``SomeThing``."""
    return "".join(word[:1].upper() + word[1:] for word in split_words(value))


def to_camel(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = to_pascal(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def to_kebab(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return "-".join(split_words(value))


# ---------------------------------------------------------------------------
# Pluralization
# ---------------------------------------------------------------------------

_UNCOUNTABLE: frozenset[str] = frozenset({
    "data", "deer", "equipment", "feedback", "fish", "information", "metadata",
    "money", "moose", "music", "news", "police", "rice", "series", "sheep",
    "software", "hardware", "species", "staff", "traffic",
})

_IRREGULAR: dict[str, str] = {
    "alumnus": "alumni",
    "appendix": "appendices",
    "cactus": "cacti",
    "child": "children",
    "criterion": "criteria",
    "datum": "data",
    "focus": "foci",
    "foot": "feet",
    "fungus": "fungi",
    "goose": "geese",
    "index": "indices",
    "man": "men",
    "matrix": "matrices",
    "medium": "media",
    "mouse": "mice",
    "nucleus": "nuclei",
    "ox": "oxen",
    "person": "people",
    "phenomenon": "phenomena",
    "quiz": "quizzes",
    "radius": "radii",
    "stimulus": "stimuli",
    "syllabus": "syllabi",
    "tooth": "teeth",
    "vertex": "vertices",
    "woman": "women",
}

_IRREGULAR_PLURALS: frozenset[str] = frozenset(_IRREGULAR.values())

# Singular nouns ending in a plain "s" (not "ss", "us" or "is").
_SINGULAR_S: frozenset[str] = frozenset({
    "alias", "atlas", "bias", "canvas", "chaos", "gas", "lens", "plus",
})

_F_TO_VES: frozenset[str] = frozenset({
    "calf", "elf", "half", "knife", "leaf", "life", "loaf", "self", "shelf",
    "thief", "wife", "wolf",
})

_O_TO_OES: frozenset[str] = frozenset({
    "echo", "hero", "potato", "tomato", "torpedo", "veto",
})

_VOWELS = "aeiou"


def _pluralize_word(word: str) -> str:
    """Pluralize a single lowercase English word."""
    if word in _UNCOUNTABLE or word in _IRREGULAR_PLURALS:
        return word
    if word in _IRREGULAR:
        return _IRREGULAR[word]
    if word in _F_TO_VES:
        return word[:-2] + "ves" if word.endswith("fe") else word[:-1] + "ves"
    if word in _O_TO_OES:
        return word + "es"
    if word.endswith("is") and len(word) > 2:
        return word[:-2] + "es"
    if word.endswith(("ss", "us")) or word in _SINGULAR_S:
        return word + "es"
    if word.endswith("s"):
        # Already plural ("users", "posts").
        return word
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if word.endswith(("x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def _restore_case(original: str, plural: str) -> str:
    if len(original) > 1 and original.isupper():
        return plural.upper()
    if original[:1].isupper():
        return plural[:1].upper() + plural[1:]
    return plural


_LAST_WORD_RE = re.compile(r"([A-Z]?[a-z]+|[A-Z]+)([\W\d_]*)$")
# Letters immediately followed by a number ("user2", "V8") form one word.
_NUMBERED_WORD_RE = re.compile(r"([A-Za-z]+)\d+(?=[\W_]*$)")


def pluralize(value: str) -> str:
    """Pluralize the last word of *value*, keeping everything before it.

    Examples::

        pluralize("category")   -> "categories"
        pluralize("blog post")  -> "blog posts"
        pluralize("SalesPerson") -> "SalesPeople"
        pluralize("box")        -> "boxes"
        pluralize("user2")      -> "user2s"
    """
    numbered = _NUMBERED_WORD_RE.search(value)
    if numbered is not None:
        letters = numbered.group(1)
        suffix = "S" if len(letters) > 1 and letters.isupper() else "s"
        return value[: numbered.end()] + suffix + value[numbered.end():]

    match = _LAST_WORD_RE.search(value)
    if match is None:
        return value
    word, trailing = match.group(1), match.group(2)
    plural = _restore_case(word, _pluralize_word(word.lower()))
    return value[: match.start(1)] + plural + trailing


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def derive_names(base_name: str) -> DerivedNames:
    """Derive every naming convention the templates need from *base_name*.

    Raises:
        InvalidNameError: If the trimmed name is empty or contains no
            alphabetic character.
    """
    name = base_name.strip() if base_name else ""
    if not name or not any(ch.isalpha() for ch in name):
        raise InvalidNameError(base_name or "")

    return DerivedNames(
        pascal=to_pascal(name),
        camel=to_camel(name),
        kebab=to_kebab(name),
        plural=pluralize(name),
    )
