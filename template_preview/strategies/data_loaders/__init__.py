"""Concrete data-context loader implementations."""

from template_preview.strategies.data_loaders.json_loader import JsonDataLoader
from template_preview.strategies.data_loaders.yaml_loader import YamlDataLoader

__all__ = [
    "JsonDataLoader",
    "YamlDataLoader",
]
