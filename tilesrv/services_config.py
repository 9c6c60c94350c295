"""Configuration of the services published by the tile server."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from tilesrv.contact import ConfigurationError, Contact

logger = logging.getLogger(__name__)

_CRS_CODE = re.compile(r"^[A-Za-z0-9_.\-]+:\S+$")


def is_crs_code(code: str) -> bool:
    """Tell whether ``code`` looks like an ``AUTHORITY:CODE`` CRS identifier."""
    return bool(_CRS_CODE.match(code))


def _request_code(code: str) -> str:
    return code.upper()


def _read_json(path: Union[str, Path]) -> Any:
    path_text = str(path)
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError:
        content = ""
    try:
        doc = json.loads(content)
    except json.JSONDecodeError as error:
        raise ConfigurationError(f"Cannot load JSON file {path_text} : {error}") from None
    if doc is None:
        raise ConfigurationError(f"Cannot load JSON file {path_text} : null document")
    return doc


def _optional_string(doc: Mapping[str, Any], key: str) -> str:
    value = doc.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError(f"Services configuration: {key} have to be a string")
    return value


_EQUIVALENCES_SHAPE = (
    "CRS equivalences file have to be a JSON object where each value is a string array"
)


@dataclass
class ServicesConfiguration:
    """Provider information, contact and CRS equivalences shared by the services."""

    service_provider: str = ""
    provider_site: str = ""
    fee: str = ""
    access_constraint: str = ""
    contact: Contact = field(default_factory=Contact)
    crs_equivalences: dict[str, list[str]] = field(default_factory=dict)
    file_path: str = ""
    crs_validator: Callable[[str], bool] = field(default=is_crs_code, repr=False, compare=False)

    @classmethod
    def from_json(cls, doc: Any) -> "ServicesConfiguration":
        """Build from a parsed JSON document; raise ConfigurationError when invalid."""
        if not isinstance(doc, Mapping):
            raise ConfigurationError("Services configuration have to be a JSON object")

        configuration = cls(
            fee=_optional_string(doc, "fee"),
            access_constraint=_optional_string(doc, "access_constraint"),
            service_provider=_optional_string(doc, "provider"),
            provider_site=_optional_string(doc, "site"),
        )

        equivalences_file = doc.get("crs_equivalences")
        if isinstance(equivalences_file, str):
            configuration.load_crs_equivalences(equivalences_file)
        elif equivalences_file is not None:
            raise ConfigurationError("crs_equivalences have to be a string")

        try:
            configuration.contact = Contact.from_json(doc.get("contact"))
        except ConfigurationError as error:
            raise ConfigurationError(f"Services configuration: {error}") from None

        return configuration

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ServicesConfiguration":
        """Read and parse a JSON services configuration file."""
        logger.info("Loading services configuration from file %s", path)
        configuration = cls.from_json(_read_json(path))
        configuration.file_path = str(path)
        return configuration

    def load_crs_equivalences(self, path: Union[str, Path]) -> None:
        """Load CRS equivalences from a JSON file mapping a CRS to a list of CRS.

        Unknown CRS are skipped with a warning. The first CRS of each list is
        the one named by the key.
        """
        doc = _read_json(path)
        logger.info("Load CRS equivalences from file %s", path)

        if not isinstance(doc, Mapping):
            raise ConfigurationError("CRS equivalences file have to be a JSON object")

        for key, values in doc.items():
            if not self.crs_validator(key):
                logger.warning("The Equivalent CRS [%s] is not present in PROJ", key)
                continue
            index = _request_code(key)
            equivalents = [index]

            if not isinstance(values, list):
                raise ConfigurationError(_EQUIVALENCES_SHAPE)
            for value in values:
                if not isinstance(value, str):
                    raise ConfigurationError(_EQUIVALENCES_SHAPE)
                if self.crs_validator(value):
                    equivalents.append(_request_code(value))
                else:
                    logger.warning("The Equivalent CRS [%s] is not present in PROJ", value)

            self.crs_equivalences.setdefault(index, equivalents)

    def get_equals_crs(self, crs: str) -> list[str]:
        """Return the CRS equivalent to ``crs``, itself first, or an empty list."""
        return list(self.crs_equivalences.get(_request_code(crs), []))

    def handle_crs_equivalences(self) -> bool:
        """Tell whether any CRS equivalence is known."""
        return bool(self.crs_equivalences)

    def are_crs_equals(self, crs1: str, crs2: str) -> bool:
        """Tell whether two CRS codes are the same or declared equivalent."""
        first = _request_code(crs1)
        second = _request_code(crs2)
        if first == second:
            return True
        if second in self.get_equals_crs(crs1)[1:]:
            return True
        return first in self.get_equals_crs(crs2)[1:]