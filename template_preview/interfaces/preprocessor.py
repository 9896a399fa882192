"""Template preprocessing interfaces.

A preprocessor rewrites raw template text before it is handed to the
template engine's compiler.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteRule:
    """A single declarative rewrite applied to template text.

    Attributes:
        name: Human-readable rule name used in logs.
        pattern: Compiled regex matching the source syntax.
        replacement: Callable producing the replacement text for a match.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: Callable[[re.Match[str]], str]


class BaseTemplatePreprocessor(ABC):
    """Abstract base class for template preprocessing strategies.

    Implementations must be pure: the input text is never modified, a new
    string is returned instead.
    """

    @abstractmethod
    def preprocess(self, template: str) -> str:
        """Rewrite template source into engine-compatible syntax.

        Args:
            template: The raw template source.

        Returns:
            The rewritten template source. Equal to the input when nothing
            matched.
        """

    @abstractmethod
    def rewrite_count(self, template: str) -> int:
        """Return how many rewrites `preprocess` would perform."""
