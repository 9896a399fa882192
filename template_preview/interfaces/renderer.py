"""Template rendering interfaces.

Defines the render boundary: user-input failures are converted into a
`RenderResult` carrying a display message instead of propagating.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a single render invocation.

    Attributes:
        output: The rendered text. Always empty when `error` is set.
        error: Display message for a data or template failure.
        rewritten_template: The template text after preprocessing, if reached.
    """

    output: str
    error: str | None = None
    rewritten_template: str | None = None

    @property
    def ok(self) -> bool:
        """Return True when the render succeeded."""
        return self.error is None


class BaseRenderer(ABC):
    """Abstract base class for preview renderers."""

    @abstractmethod
    def render(
        self,
        template: str,
        data_text: str,
        data_format: str = "json",
    ) -> RenderResult:
        """Parse data, preprocess and render a template.

        Args:
            template: Raw template source.
            data_text: Raw data block.
            data_format: Name of the data format ('json' or 'yaml').

        Returns:
            A RenderResult. Never raises for malformed user input.
        """

    @abstractmethod
    def render_template(self, template: str, context: dict[str, Any]) -> str:
        """Render a template against an already-parsed context.

        Raises:
            TemplateRenderError: If compilation or evaluation fails.
        """


class TemplateRenderError(RuntimeError):
    """Exception raised when a template fails to compile or evaluate."""

    pass
