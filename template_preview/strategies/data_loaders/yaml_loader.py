"""YAML data-context loader."""

import logging
from typing import Any

import yaml

from template_preview.interfaces.data_loader import BaseDataLoader, DataParseError

logger = logging.getLogger(__name__)


class YamlDataLoader(BaseDataLoader):
    """Parses YAML data blocks into render contexts.

    Uses `yaml.safe_load`, so only plain data types are constructed.
    """

    def load(self, text: str) -> dict[str, Any]:
        """Parse a YAML mapping.

        Raises:
            DataParseError: On malformed YAML or a non-mapping document.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.warning(f"Invalid YAML data block: {e}")
            mark = getattr(e, "problem_mark", None)
            problem = getattr(e, "problem", None) or str(e)
            if mark is not None:
                raise DataParseError(
                    f"Invalid YAML at line {mark.line + 1}, column {mark.column + 1}: {problem}"
                ) from e
            raise DataParseError(f"Invalid YAML: {problem}") from e
        except RecursionError as e:
            logger.warning("YAML data block is nested too deeply")
            raise DataParseError("Invalid YAML: nested too deeply") from e

        return self.ensure_mapping(data)

    def dump(self, data: Any) -> str:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    @property
    def format_name(self) -> str:
        return "yaml"
