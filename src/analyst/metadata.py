"""Metadata extraction: application name, domain, locale and description."""

import logging
import re
from typing import Any, Callable

from .text import split_sentences

logger = logging.getLogger(__name__)

# Ordered keyword -> domain table. Earlier entries win.
DOMAIN_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("civic", "civic-tech"),
    ("community", "civic-tech"),
    ("government", "civic-tech"),
    ("productivity", "productivity"),
    ("task", "productivity"),
    ("todo", "productivity"),
    ("project management", "productivity"),
    ("e-commerce", "e-commerce"),
    ("shop", "e-commerce"),
    ("store", "e-commerce"),
    ("selling", "e-commerce"),
    ("social", "social"),
    ("networking", "social"),
    ("chat", "social"),
    ("healthcare", "healthcare"),
    ("medical", "healthcare"),
    ("education", "education"),
    ("learning", "education"),
    ("finance", "finance"),
    ("banking", "finance"),
    ("payment", "finance"),
)
DEFAULT_DOMAIN = "general"

LANGUAGE_LOCALES: tuple[tuple[str, str], ...] = (
    ("spanish", "es-ES"),
    ("french", "fr-FR"),
    ("german", "de-DE"),
    ("italian", "it-IT"),
    ("portuguese", "pt-PT"),
    ("chinese", "zh-CN"),
    ("japanese", "ja-JP"),
)
DEFAULT_LOCALE = "en-US"

DOMAIN_DEFAULT_NAMES: dict[str, str] = {
    "civic-tech": "CivicApp",
    "productivity": "TaskManager",
    "e-commerce": "ShopApp",
    "social": "SocialHub",
    "healthcare": "HealthApp",
    "education": "LearnHub",
    "finance": "FinanceApp",
    "general": "MyApp",
}
DEFAULT_NAME = "MyApp"

NAME_STOPWORDS = frozenset({"Create", "Build", "Add", "Make", "The", "A", "An"})
MIN_NAME_LENGTH = 3

# Exclusive bounds on the first sentence used as description.
DESCRIPTION_MIN_EXCLUSIVE = 10
DESCRIPTION_MAX_EXCLUSIVE = 200

_APP_NAME_RE = re.compile(r"^[A-Z][a-zA-Z]*$")
_LOCALE_TOKEN_RE = re.compile(r"\b([a-z]{2}-[A-Z]{2})\b")

_CALLED_RE = re.compile(r"(?:called|named)\s+([A-Z][a-zA-Z]*)")
_CREATE_COMMA_RE = re.compile(r"(?:create|build)\s+([A-Z][a-zA-Z]*),")
_APPOSITIVE_RE = re.compile(r"([A-Z][a-zA-Z]*),\s+(?:a|an)")
_CREATE_APP_RE = re.compile(r"(?:create|build)\s+(?:an?\s+)?(?:app\s+)?([A-Z][a-zA-Z]+)")


def is_valid_app_name(name: str) -> bool:
    """PascalCase, at least three characters and not a common verb/article."""
    return (
        bool(_APP_NAME_RE.match(name))
        and len(name) >= MIN_NAME_LENGTH
        and name not in NAME_STOPWORDS
    )


def _first_valid_capture(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match and is_valid_app_name(match.group(1)):
        return match.group(1)
    return None


def match_called(text: str) -> str | None:
    """'... called TaskFlow' / '... named TaskFlow'."""
    return _first_valid_capture(_CALLED_RE, text)


def match_create_comma(text: str) -> str | None:
    """'create TaskFlow, ...'."""
    return _first_valid_capture(_CREATE_COMMA_RE, text)


def match_appositive(text: str) -> str | None:
    """'TaskFlow, a ...' / 'TaskFlow, an ...'."""
    return _first_valid_capture(_APPOSITIVE_RE, text)


def match_create_app(text: str) -> str | None:
    """'build an app TaskFlow' and shorter forms."""
    return _first_valid_capture(_CREATE_APP_RE, text)


# Ordered matcher chain for the application name; the first hit wins.
NAME_MATCHERS: tuple[Callable[[str], str | None], ...] = (
    match_called,
    match_create_comma,
    match_appositive,
    match_create_app,
)


class MetadataExtractor:
    """Derives application metadata from a natural-language specification.

    Extraction never fails: every field has a fallback.

    Example:
        >>> MetadataExtractor().extract("Build an app called TaskFlow.")["name"]
        'TaskFlow'
    """

    def extract(self, text: str) -> dict[str, Any]:
        """Extract metadata.

        Args:
            text: Natural-language specification.

        Returns:
            Metadata dict with name, domain, locale and, when the first
            sentence qualifies, description.
        """
        domain = self.extract_domain(text)
        metadata: dict[str, Any] = {
            "name": self.extract_name(text, domain),
            "domain": domain,
            "locale": self.extract_locale(text),
        }

        description = self.extract_description(text)
        if description:
            metadata["description"] = description

        logger.debug(
            f"Extracted metadata name={metadata['name']} "
            f"domain={domain} locale={metadata['locale']}"
        )
        return metadata

    def extract_name(self, text: str, domain: str | None = None) -> str:
        """Application name from the matcher chain, else a domain default."""
        for matcher in NAME_MATCHERS:
            name = matcher(text)
            if name:
                return name

        if domain is None:
            domain = self.extract_domain(text)
        return DOMAIN_DEFAULT_NAMES.get(domain, DEFAULT_NAME)

    def extract_domain(self, text: str) -> str:
        """First keyword contained in the lower-cased text decides the domain."""
        lower = text.lower()
        for keyword, domain in DOMAIN_KEYWORDS:
            if keyword in lower:
                return domain
        return DEFAULT_DOMAIN

    def extract_locale(self, text: str) -> str:
        """Explicit xx-XX token, else a mentioned language, else en-US."""
        match = _LOCALE_TOKEN_RE.search(text)
        if match:
            return match.group(1)

        lower = text.lower()
        for language, locale in LANGUAGE_LOCALES:
            if language in lower:
                return locale
        return DEFAULT_LOCALE

    def extract_description(self, text: str) -> str | None:
        """First sentence, when it is neither too short nor too long."""
        first_sentence = split_sentences(text)[0].strip()
        if DESCRIPTION_MIN_EXCLUSIVE < len(first_sentence) < DESCRIPTION_MAX_EXCLUSIVE:
            return first_sentence
        return None


__all__ = [
    "DOMAIN_KEYWORDS",
    "LANGUAGE_LOCALES",
    "DOMAIN_DEFAULT_NAMES",
    "NAME_MATCHERS",
    "MetadataExtractor",
    "is_valid_app_name",
    "match_called",
    "match_create_comma",
    "match_appositive",
    "match_create_app",
]
