"""Abstract base class for data-context loaders.

Loaders turn a user-supplied text block (JSON, YAML) into the mapping a
template is rendered against, and serialize a mapping back to text so the
UI can switch between formats.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseDataLoader(ABC):
    """Abstract base class for data-context parsing strategies.

    Example:
        ```python
        class JsonDataLoader(BaseDataLoader):
            def load(self, text: str) -> dict[str, Any]:
                ...
        ```
    """

    @abstractmethod
    def load(self, text: str) -> dict[str, Any]:
        """Parse a data block into a render context.

        Args:
            text: The raw data text. Blank text yields an empty context.

        Returns:
            The parsed mapping.

        Raises:
            DataParseError: If the text is malformed or is not a mapping.
        """
        ...

    @abstractmethod
    def dump(self, data: Any) -> str:
        """Serialize data back into this loader's text format."""
        ...

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format identifier (e.g., 'json')."""
        ...

    def ensure_mapping(self, data: Any) -> dict[str, Any]:
        """Coerce a parsed document into a render context.

        Args:
            data: The parsed document.

        Returns:
            The document itself, or an empty dict for an empty document.

        Raises:
            DataParseError: If the top-level value is not a mapping.
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DataParseError(
                f"Top-level {self.format_name.upper()} value must be an object, "
                f"got {type(data).__name__}"
            )
        return data


class DataParseError(ValueError):
    """Exception raised when a data block cannot be parsed."""

    pass


class UnsupportedFormatError(ValueError):
    """Exception raised for an unknown data format name."""

    pass
