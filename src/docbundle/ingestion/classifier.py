"""Path-based category assignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

FALLBACK_CATEGORY = "Other"


@dataclass(slots=True, frozen=True)
class CategoryRule:
    marker: str
    label: str


# Checked in order; the first marker found in the path wins.
DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("README", "Getting Started"),
    CategoryRule("CONTRIBUTING", "Contributing"),
    CategoryRule("CHANGELOG", "Changelog"),
    CategoryRule("LICENSE", "Legal"),
    CategoryRule("docs", "Documentation"),
    CategoryRule("blog", "Blog Posts"),
)


class Classifier:
    """Maps a relative path to a category label using ordered substring rules."""

    def __init__(
        self,
        rules: Sequence[CategoryRule] = DEFAULT_RULES,
        *,
        fallback: str = FALLBACK_CATEGORY,
    ) -> None:
        self.rules = tuple(rules)
        self.fallback = fallback

    def classify(self, relative_path: str) -> str:
        for rule in self.rules:
            if rule.marker in relative_path:
                return rule.label
        return self.fallback

    __call__ = classify


_DEFAULT_CLASSIFIER = Classifier()


def classify(relative_path: str) -> str:
    """Classify with the default rule table."""
    return _DEFAULT_CLASSIFIER.classify(relative_path)
