"""Component Factory for preview pipeline construction.

Every component is built explicitly from `Settings`. Environments are
never cached: each renderer gets a fresh Jinja2 environment with the
preview filters registered, so filter state cannot leak between callers.
"""

import logging

from jinja2 import Environment, StrictUndefined, Undefined

from template_preview.core.config import Settings, get_settings
from template_preview.interfaces.data_loader import BaseDataLoader, UnsupportedFormatError
from template_preview.interfaces.preprocessor import BaseTemplatePreprocessor
from template_preview.strategies.data_loaders import JsonDataLoader, YamlDataLoader
from template_preview.strategies.filters import register_filters
from template_preview.strategies.preprocessors import SliceSyntaxPreprocessor
from template_preview.strategies.renderers import JinjaPreviewRenderer

logger = logging.getLogger(__name__)

DATA_FORMATS = ("json", "yaml")


class ComponentFactory:
    """Factory for creating preview components based on configuration.

    Example:
        ```python
        factory = ComponentFactory(Settings(strict_undefined=True))
        renderer = factory.create_renderer()
        result = renderer.render("Hello {{ name[1:-1] }}", '{"name": "World"}')
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._preprocessor_cache: BaseTemplatePreprocessor | None = None
        self._data_loader_cache: dict[str, BaseDataLoader] = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_preprocessor(self) -> BaseTemplatePreprocessor:
        """Get the slice-syntax preprocessor.

        Returns:
            A BaseTemplatePreprocessor implementation instance.
        """
        if self._preprocessor_cache is None:
            logger.info(
                f"Instantiating slice-syntax preprocessor: "
                f"expressions_only={self._settings.expressions_only}"
            )
            self._preprocessor_cache = SliceSyntaxPreprocessor(
                expressions_only=self._settings.expressions_only,
            )
        return self._preprocessor_cache

    def get_data_loader(self, data_format: str | None = None) -> BaseDataLoader:
        """Get a data loader instance for the specified format.

        Args:
            data_format: 'json' or 'yaml'. If None, uses settings.

        Returns:
            A BaseDataLoader implementation instance.

        Raises:
            UnsupportedFormatError: If the format is unknown.
        """
        data_format = (data_format or self._settings.default_data_format).lower()

        if data_format not in self._data_loader_cache:
            logger.info(f"Instantiating data loader: {data_format}")

            match data_format:
                case "json":
                    self._data_loader_cache[data_format] = JsonDataLoader(
                        indent=self._settings.json_indent,
                    )
                case "yaml":
                    self._data_loader_cache[data_format] = YamlDataLoader()
                case _:
                    raise UnsupportedFormatError(
                        f"Unknown data format: {data_format}. "
                        f"Valid options: 'json', 'yaml'"
                    )

        return self._data_loader_cache[data_format]

    def create_environment(self) -> Environment:
        """Create a new Jinja2 environment with the preview filters.

        Returns:
            A fresh, unshared Environment.
        """
        environment = Environment(
            autoescape=self._settings.autoescape,
            undefined=StrictUndefined if self._settings.strict_undefined else Undefined,
            trim_blocks=self._settings.trim_blocks,
            keep_trailing_newline=True,
        )
        register_filters(environment)
        logger.debug(f"Created Jinja2 environment with filters: {sorted(environment.filters)}")
        return environment

    def create_renderer(self) -> JinjaPreviewRenderer:
        """Create a preview renderer wired with a fresh environment.

        Returns:
            A JinjaPreviewRenderer instance.
        """
        return JinjaPreviewRenderer(
            environment=self.create_environment(),
            preprocessor=self.get_preprocessor(),
            data_loaders={fmt: self.get_data_loader(fmt) for fmt in DATA_FORMATS},
        )

    def convert_data(self, text: str, source_format: str, target_format: str) -> str:
        """Convert a data block between formats.

        Args:
            text: The data block in `source_format`.
            source_format: Format of `text`.
            target_format: Format to produce.

        Returns:
            The data block serialized in `target_format`.

        Raises:
            DataParseError: If `text` is malformed.
            UnsupportedFormatError: If either format is unknown.
        """
        source = self.get_data_loader(source_format)
        target = self.get_data_loader(target_format)
        if source is target:
            return text
        return target.dump(source.load(text))

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        Useful for testing or when settings change.
        """
        self._preprocessor_cache = None
        self._data_loader_cache = {}
        logger.debug("Component factory cache cleared")
