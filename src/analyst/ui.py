"""UI extraction: routes, components and presentation hints."""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

HOME_ROUTE = "/"
DEFAULT_COMPONENT = "HomePage"

_ROUTE_TOKEN_RE = re.compile(r"/[a-z0-9/:_-]*", re.IGNORECASE)
_COMPONENT_RE = re.compile(
    r"([A-Z][a-zA-Z]*(?:Form|List|View|Card|Table|Modal|Dialog|Button))"
)

# Page keyword -> route.
PAGE_ROUTES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(?:login|signin)\s+page", re.IGNORECASE), "/login"),
    (re.compile(r"(?:register|signup)\s+page", re.IGNORECASE), "/register"),
    (re.compile(r"dashboard", re.IGNORECASE), "/dashboard"),
    (re.compile(r"profile", re.IGNORECASE), "/profile"),
    (re.compile(r"settings", re.IGNORECASE), "/settings"),
)

# Ordered (phrases, value) tables; the first entry with a phrase present wins.
THEME_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("dark theme", "dark mode"), "dark"),
    (("light theme", "light mode"), "light"),
)
LAYOUT_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("sidebar",), "sidebar"),
    (("top navigation", "navbar"), "navbar"),
    (("dashboard layout",), "dashboard"),
)


def pluralize(word: str) -> str:
    """Naive English plural: story -> stories, box -> boxes, task -> tasks."""
    if word.endswith("y"):
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "z")):
        return word + "es"
    return word + "s"


def _first_hint(text: str, hints: tuple[tuple[tuple[str, ...], str], ...]) -> str | None:
    lower = text.lower()
    for phrases, value in hints:
        if any(phrase in lower for phrase in phrases):
            return value
    return None


class UIExtractor:
    """Derives the UI surface of a specification, seeded by entity names."""

    def extract(self, text: str, entity_names: list[str] | None = None) -> dict[str, Any]:
        """Extract the UI section.

        Args:
            text: Natural-language specification.
            entity_names: Names of extracted entities; each contributes list
                and detail routes plus form and list components.

        Returns:
            UI dict with sorted routes and components, and theme/layout when
            mentioned.
        """
        entity_names = entity_names or []

        ui: dict[str, Any] = {
            "routes": self.extract_routes(text, entity_names),
            "components": self.extract_components(text, entity_names),
        }

        theme = self.extract_theme(text)
        if theme:
            ui["theme"] = theme
        layout = self.extract_layout(text)
        if layout:
            ui["layout"] = layout

        logger.debug(
            f"Extracted {len(ui['routes'])} route(s), {len(ui['components'])} component(s)"
        )
        return ui

    def extract_routes(self, text: str, entity_names: list[str]) -> list[str]:
        """Home, explicit paths, entity routes and page routes, sorted."""
        routes = {HOME_ROUTE}

        for match in _ROUTE_TOKEN_RE.finditer(text):
            if len(match.group(0)) > 1:
                routes.add(match.group(0))

        for entity_name in entity_names:
            collection = f"/{pluralize(entity_name.lower())}"
            routes.add(collection)
            routes.add(f"{collection}/:id")

        for pattern, route in PAGE_ROUTES:
            if pattern.search(text):
                routes.add(route)

        return sorted(routes)

    def extract_components(self, text: str, entity_names: list[str]) -> list[str]:
        """Named components plus Form/List per entity, sorted."""
        components = {match.group(1) for match in _COMPONENT_RE.finditer(text)}

        for entity_name in entity_names:
            components.add(f"{entity_name}Form")
            components.add(f"{entity_name}List")

        if not components:
            return [DEFAULT_COMPONENT]
        return sorted(components)

    def extract_theme(self, text: str) -> str | None:
        """'dark' or 'light' when a theme/mode is mentioned; dark wins."""
        return _first_hint(text, THEME_HINTS)

    def extract_layout(self, text: str) -> str | None:
        """Layout preference: sidebar, then navbar, then dashboard."""
        return _first_hint(text, LAYOUT_HINTS)


__all__ = ["PAGE_ROUTES", "UIExtractor", "pluralize"]
