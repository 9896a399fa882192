"""Jinja2 preview renderer.

Runs the full preview pipeline: parse the data block, rewrite slice
syntax, compile and render with an injected Jinja2 environment.
"""

import logging
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, TemplateError, TemplateSyntaxError

from template_preview.interfaces.data_loader import BaseDataLoader, DataParseError
from template_preview.interfaces.preprocessor import BaseTemplatePreprocessor
from template_preview.interfaces.renderer import BaseRenderer, RenderResult, TemplateRenderError

logger = logging.getLogger(__name__)


class JinjaPreviewRenderer(BaseRenderer):
    """Renders preview templates against JSON or YAML data.

    The environment is supplied by the caller with the preview filters
    already registered; this class never creates or shares one itself.
    """

    def __init__(
        self,
        environment: Environment,
        preprocessor: BaseTemplatePreprocessor,
        data_loaders: Mapping[str, BaseDataLoader],
    ) -> None:
        """Initialize the renderer.

        Args:
            environment: Configured Jinja2 environment.
            preprocessor: Preprocessor applied before compilation.
            data_loaders: Loaders keyed by data format name.
        """
        self._environment = environment
        self._preprocessor = preprocessor
        self._data_loaders = dict(data_loaders)

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def supported_formats(self) -> set[str]:
        return set(self._data_loaders)

    def render(
        self,
        template: str,
        data_text: str,
        data_format: str = "json",
    ) -> RenderResult:
        """Run the whole pipeline for one preview.

        Data and template failures are logged and returned as an error
        message with empty output.

        Args:
            template: Raw template source.
            data_text: Raw data block.
            data_format: Name of the data format.

        Returns:
            The RenderResult for this invocation.
        """
        try:
            context = self.load_context(data_text, data_format)
        except DataParseError as e:
            logger.warning(f"Render aborted, data block rejected: {e}")
            return RenderResult(output="", error=f"Data error: {e}")

        rewritten = self._preprocessor.preprocess(template)

        try:
            output = self._render_rewritten(rewritten, context)
        except TemplateRenderError as e:
            logger.warning(f"Render failed: {e}")
            return RenderResult(
                output="",
                error=f"Template error: {e}",
                rewritten_template=rewritten,
            )

        logger.info(f"Rendered {len(template)} chars of template into {len(output)} chars")
        return RenderResult(output=output, rewritten_template=rewritten)

    def render_template(self, template: str, context: dict[str, Any]) -> str:
        """Preprocess and render a template against a parsed context.

        Raises:
            TemplateRenderError: If compilation or evaluation fails.
        """
        return self._render_rewritten(self._preprocessor.preprocess(template), context)

    def load_context(self, data_text: str, data_format: str = "json") -> dict[str, Any]:
        """Parse a data block with the loader for `data_format`.

        Raises:
            DataParseError: If the format is unknown or the text is malformed.
        """
        loader = self._data_loaders.get(data_format.lower())
        if loader is None:
            raise DataParseError(
                f"Unknown data format: {data_format}. "
                f"Valid options: {', '.join(sorted(self._data_loaders))}"
            )
        return loader.load(data_text)

    def _render_rewritten(self, rewritten: str, context: dict[str, Any]) -> str:
        try:
            compiled = self._environment.from_string(rewritten)
        except TemplateSyntaxError as e:
            raise TemplateRenderError(f"line {e.lineno}: {e.message}") from e
        except (RecursionError, SyntaxError) as e:
            raise TemplateRenderError(f"template is nested too deeply to compile: {e}") from e

        try:
            return compiled.render(context)
        except TemplateError as e:
            raise TemplateRenderError(str(e)) from e
        except Exception as e:
            logger.error(f"Unexpected error evaluating template: {e}", exc_info=True)
            raise TemplateRenderError(f"{type(e).__name__}: {e}") from e
