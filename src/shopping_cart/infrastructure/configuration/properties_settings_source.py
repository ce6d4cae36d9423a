from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

PROPERTIES_FILE_ENV = "CART_PROPERTIES_FILE"
DEFAULT_PROPERTIES_FILE = "config.properties"
KEY_PREFIX = "product."


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java-style ``.properties`` content into a flat dict.

    Supports ``key=value`` and ``key: value`` lines, ``#`` and ``!`` comments and
    blank lines. Later keys win. Line continuations and escapes are not supported.
    """
    properties: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        separators = [i for i in (line.find("="), line.find(":")) if i != -1]
        if not separators:
            properties[line] = ""
            continue
        cut = min(separators)
        properties[line[:cut].strip()] = line[cut + 1 :].strip()
    return properties


def properties_to_field_names(properties: dict[str, str]) -> dict[str, str]:
    """Map dotted keys to settings field names: ``product.api.url`` -> ``api_url``."""
    fields: dict[str, str] = {}
    for key, value in properties.items():
        if not key.startswith(KEY_PREFIX):
            continue
        fields[key[len(KEY_PREFIX) :].replace(".", "_")] = value
    return fields


class PropertiesSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a ``config.properties`` file.

    The path comes from the constructor, else ``CART_PROPERTIES_FILE``, else
    ``config.properties`` in the working directory. A missing file yields no values.
    """

    def __init__(self, settings_cls: type[BaseSettings], properties_file: Path | None = None) -> None:
        super().__init__(settings_cls)
        self.properties_file = properties_file or Path(
            os.environ.get(PROPERTIES_FILE_ENV, DEFAULT_PROPERTIES_FILE)
        )
        self._values = self._load()

    def _load(self) -> dict[str, str]:
        if not self.properties_file.exists():
            return {}
        text = self.properties_file.read_text(encoding="utf-8")
        return properties_to_field_names(parse_properties(text))

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is not None:
                data[key] = value
        return data
