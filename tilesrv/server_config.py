"""General configuration of the tile server."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Protocol, Union

from tilesrv.contact import ConfigurationError

logger = logging.getLogger(__name__)

LOG_OUTPUTS = ("rolling_file", "standard_output", "static_file")


class LogLevel(Enum):
    """Logging severity, named as in the configuration file."""

    FATAL = "fatal"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    @property
    def logging_level(self) -> int:
        """The matching level of the standard logging module."""
        return {
            LogLevel.FATAL: logging.CRITICAL,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


DEFAULT_LOG_OUTPUT = "standard_output"
DEFAULT_LOG_FILE_PREFIX = "/var/tmp/rok4"
DEFAULT_LOG_FILE_PERIOD = 3600
DEFAULT_LOG_LEVEL = LogLevel.WARN
DEFAULT_NB_THREAD = 2


class _Layer(Protocol):
    id: str


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_logger(section: Any) -> dict[str, Any]:
    values: dict[str, Any] = {
        "log_output": DEFAULT_LOG_OUTPUT,
        "log_file_prefix": DEFAULT_LOG_FILE_PREFIX,
        "log_file_period": DEFAULT_LOG_FILE_PERIOD,
        "log_level": DEFAULT_LOG_LEVEL,
    }
    if section is None:
        logger.info("No logger section, default values used")
        return values
    if not isinstance(section, Mapping):
        raise ConfigurationError("logger have to be an object")

    output = section.get("output")
    if output is None:
        logger.info("No logger.output, default value used")
    elif not isinstance(output, str):
        raise ConfigurationError("logger.output have to be a string")
    elif output not in LOG_OUTPUTS:
        raise ConfigurationError(f"logger.output '{output}' is unknown")
    else:
        values["log_output"] = output

    prefix = section.get("file_prefix")
    if prefix is None:
        logger.info("No logger.file_prefix, default value used")
    elif not isinstance(prefix, str):
        raise ConfigurationError("logger.file_prefix have to be a string")
    else:
        values["log_file_prefix"] = prefix

    period = section.get("file_period")
    if period is None:
        logger.info("No logger.file_period, default value used")
    elif not _is_number(period):
        raise ConfigurationError("logger.file_period have to be a number")
    else:
        values["log_file_period"] = int(period)

    level = section.get("level")
    if level is None:
        logger.info("No logger.level, default value used")
    elif not isinstance(level, str):
        raise ConfigurationError("logger.level have to be a string")
    else:
        try:
            values["log_level"] = LogLevel(level)
        except ValueError:
            raise ConfigurationError(f"logger.level '{level}' is unknown") from None

    return values


def _cache_value(cache: Any, key: str) -> int:
    if isinstance(cache, Mapping):
        value = cache.get(key)
        if _is_number(value) and value >= 1:
            return int(value)
    return -1


@dataclass
class ServerConfiguration:
    """Server-wide settings: logging, cache, threads, socket and file locations."""

    socket: str
    services_configuration_file: str
    styles_directory: str
    tile_matrix_sets_directory: str
    layers_list: str = ""
    log_output: str = DEFAULT_LOG_OUTPUT
    log_file_prefix: str = DEFAULT_LOG_FILE_PREFIX
    log_file_period: int = DEFAULT_LOG_FILE_PERIOD
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    threads_count: int = DEFAULT_NB_THREAD
    cache_size: int = -1
    cache_validity: int = -1
    backlog: int = 0
    enabled: bool = True
    file_path: str = ""
    layers: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, doc: Any) -> "ServerConfiguration":
        """Build from a parsed JSON document; raise ConfigurationError when invalid."""
        if not isinstance(doc, Mapping):
            raise ConfigurationError("Server configuration have to be a JSON object")

        log_values = _parse_logger(doc.get("logger"))

        cache = doc.get("cache")
        cache_size = _cache_value(cache, "size")
        cache_validity = _cache_value(cache, "validity")

        threads = doc.get("threads")
        if threads is None:
            logger.info("No threads, default value used")
            threads_count = DEFAULT_NB_THREAD
        elif not _is_number(threads):
            raise ConfigurationError("threads have to be a number")
        else:
            threads_count = int(threads)

        port = doc.get("port")
        if not isinstance(port, str) or port == "":
            raise ConfigurationError(
                "Port have to be provided and have to be a string (example: ':9000')"
            )

        backlog_value = doc.get("backlog")
        if backlog_value is None:
            logger.info("No backlog, default value used")
            backlog = 0
        elif not _is_number(backlog_value):
            raise ConfigurationError("backlog have to be a number")
        else:
            backlog = int(backlog_value)

        enabled_value = doc.get("enabled")
        if enabled_value is None:
            enabled = True
        elif not isinstance(enabled_value, bool):
            raise ConfigurationError("enabled have to be a boolean")
        else:
            enabled = enabled_value

        configurations = doc.get("configurations")
        if configurations is None:
            raise ConfigurationError("No configuration section")
        if not isinstance(configurations, Mapping):
            raise ConfigurationError("configuration have to be an object")

        services = configurations.get("services")
        if not isinstance(services, str):
            raise ConfigurationError("configurations.services have to be provided and be a string")

        layers_list = configurations.get("layers")
        if layers_list is None:
            layers_list = ""
        elif not isinstance(layers_list, str):
            raise ConfigurationError("configurations.layers have to be a string")

        styles = configurations.get("styles")
        if not isinstance(styles, str):
            raise ConfigurationError("configurations.styles have to be provided and be a string")

        tile_matrix_sets = configurations.get("tile_matrix_sets")
        if not isinstance(tile_matrix_sets, str):
            raise ConfigurationError(
                "configurations.tile_matrix_sets have to be provided and be a string"
            )

        return cls(
            socket=port,
            services_configuration_file=services,
            styles_directory=styles,
            tile_matrix_sets_directory=tile_matrix_sets,
            layers_list=layers_list,
            threads_count=threads_count,
            cache_size=cache_size,
            cache_validity=cache_validity,
            backlog=backlog,
            enabled=enabled,
            **log_values,
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ServerConfiguration":
        """Read and parse a JSON configuration file."""
        path_text = str(path)
        logger.info("Loading server configuration from file %s", path_text)
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

        configuration = cls.from_json(doc)
        configuration.file_path = path_text
        return configuration

    def add_layer(self, layer: _Layer) -> None:
        """Register a layer under its identifier; an existing one is kept."""
        self.layers.setdefault(layer.id, layer)

    def get_layer(self, layer_id: str) -> Optional[Any]:
        """Return the layer with this identifier, or None."""
        return self.layers.get(layer_id)

    def delete_layer(self, layer_id: str) -> None:
        """Remove the layer with this identifier, if present."""
        self.layers.pop(layer_id, None)

    def layers_count(self) -> int:
        """Number of registered layers."""
        return len(self.layers)