"""Text helpers shared by the extractors."""

import re

_SENTENCE_DELIMITERS = re.compile(r"[.!?]")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def split_sentences(text: str) -> list[str]:
    """Split text on sentence punctuation.

    Fragments are returned unstripped, including empty trailing ones.
    """
    return _SENTENCE_DELIMITERS.split(text)


def mentions(sentence: str, name: str) -> bool:
    """Check whether a sentence mentions a name, ignoring case."""
    return name.lower() in sentence.lower()


def relevant_sentences(text: str, *names: str) -> list[str]:
    """Sentences mentioning any of the given names."""
    return [
        sentence
        for sentence in split_sentences(text)
        if any(mentions(sentence, name) for name in names)
    ]


def alphanumeric_length(value: str) -> int:
    """Number of ASCII letters and digits in a value."""
    return len(_NON_ALPHANUMERIC.sub("", value))


def to_camel_case(value: str) -> str:
    """Convert a token to camelCase.

    Non-alphanumerics act as word boundaries. Interior capitals are kept, so
    `createdAt` stays `createdAt` and `due_date` becomes `dueDate`.
    """
    words = _NON_ALPHANUMERIC.sub(" ", value).split()
    if not words:
        return ""

    first, rest = words[0], words[1:]
    return first[:1].lower() + first[1:] + "".join(
        word[:1].upper() + word[1:] for word in rest
    )
