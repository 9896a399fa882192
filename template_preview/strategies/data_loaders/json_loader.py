"""JSON data-context loader."""

import json
import logging
from typing import Any

from template_preview.interfaces.data_loader import BaseDataLoader, DataParseError

logger = logging.getLogger(__name__)


class JsonDataLoader(BaseDataLoader):
    """Parses JSON data blocks into render contexts."""

    def __init__(self, indent: int = 2) -> None:
        """Initialize the loader.

        Args:
            indent: Indentation used when dumping data back to text.
        """
        self._indent = indent

    def load(self, text: str) -> dict[str, Any]:
        """Parse a JSON object.

        Raises:
            DataParseError: On malformed JSON or a non-object document.
        """
        if not text.strip():
            return {}

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON data block: {e}")
            raise DataParseError(
                f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e
        except RecursionError as e:
            logger.warning("JSON data block is nested too deeply")
            raise DataParseError("Invalid JSON: nested too deeply") from e

        return self.ensure_mapping(data)

    def dump(self, data: Any) -> str:
        return json.dumps(data, indent=self._indent, ensure_ascii=False, default=str)

    @property
    def format_name(self) -> str:
        return "json"
