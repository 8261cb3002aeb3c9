"""The application context: the loaded application configuration and lookups in it."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .directories import ApplicationDirectories
from .systemutils import PATH_SEPARATOR, split_string

logger = logging.getLogger(__name__)

LOGGING_DESTINATION_CONFIG_PATH = "logging/loggers"
LOG_LEVEL_CONFIG_PATH = "logging"
LOG_LEVEL_NAME = "logLevel"

_PACKAGE_LOGGER = "levelpipe"
_LEVEL_ALIASES = {"TRACE": logging.DEBUG, "WARN": logging.WARNING}
_USE_APP_CONFIG: Any = object()

T = TypeVar("T")


def _level_from_name(name: str) -> int | None:
    key = name.strip().upper().removeprefix("LOG_LEVEL_")
    if key in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[key]
    level = logging.getLevelName(key)
    return level if isinstance(level, int) else None


class ApplicationContext:
    """Holds the application configuration and the application's directories."""

    def __init__(self) -> None:
        self._config: Any = None
        self._log_level: str | None = None
        self._logging_destinations: list[dict[str, str]] = []
        self.application_directories: ApplicationDirectories | None = None

    @property
    def config(self) -> Any:
        """The parsed application configuration, or None if none is loaded."""
        return self._config

    @property
    def log_level(self) -> str | None:
        """The log level named by the configuration, if any."""
        return self._log_level

    @property
    def logging_destinations(self) -> list[dict[str, str]]:
        """The logging destinations of the configuration that name a type."""
        return [dict(destination) for destination in self._logging_destinations]

    def reset(self) -> None:
        """Forget the configuration and the application directories."""
        self._config = None
        self._log_level = None
        self._logging_destinations = []
        self.application_directories = None

    def load_application_config(self, config_file_path: str) -> None:
        """Load a JSON configuration file and apply its logging settings.

        A file that cannot be read or parsed is logged and leaves the
        context without a configuration.
        """
        self.reset()
        logger.info("Loading app config from file: %s", config_file_path)
        try:
            with open(config_file_path, encoding="utf-8") as config_file:
                self._config = json.load(config_file)
        except (OSError, ValueError) as exc:
            logger.error("%s", exc)
        else:
            logger.debug("Success loading app config from file: %s", config_file_path)
        self._configure_logging_destinations()
        self._configure_log_level()

    def _configure_logging_destinations(self) -> None:
        destinations = self.find_recursive_in_json_tree(LOGGING_DESTINATION_CONFIG_PATH)
        if destinations is None:
            logger.warning(
                "No logging destination is defined by application config. "
                "Hence, the default logging destination will be used."
            )
            return
        entries = destinations if isinstance(destinations, list) else [destinations]
        self._logging_destinations = [
            {key: str(value) for key, value in entry.items()}
            for entry in entries
            if isinstance(entry, dict) and "type" in entry
        ]
        logger.debug("Logger has been configured from json: '%s'", json.dumps(destinations))

    def _configure_log_level(self) -> None:
        logging_config = self.find_recursive_in_json_tree(LOG_LEVEL_CONFIG_PATH)
        if not isinstance(logging_config, dict):
            return
        name = logging_config.get(LOG_LEVEL_NAME)
        if not isinstance(name, str):
            return
        level = _level_from_name(name)
        if level is None:
            logger.warning("Unknown log level '%s' in application config", name)
            return
        self._log_level = name
        logging.getLogger(_PACKAGE_LOGGER).setLevel(level)

    def find_recursive_in_json_tree(self, path: str, json_object: Any = _USE_APP_CONFIG) -> Any:
        """Follow a slash separated path of object members; None if a member is missing.

        Without a JSON object the application configuration is searched.
        """
        current = self._config if json_object is _USE_APP_CONFIG else json_object
        logger.debug("searching for json objects with path: '%s'", path)
        for element in split_string(path, PATH_SEPARATOR):
            if isinstance(current, dict) and element in current:
                current = current[element]
            else:
                logger.error(
                    "json '%s' does not contain the required object or array named: '%s'",
                    json.dumps(current),
                    element,
                )
                return None
        return current

    def create_objects_from_json(
        self,
        factory: Callable[..., T],
        json_object: Any,
        path: str,
        *args: Any,
    ) -> list[T]:
        """Build one object per JSON object found at the path.

        An array yields one object per element, an object yields one. Each
        is built as ``factory(element, *args)``; if that fails the object is
        built as ``factory(*args)`` instead.
        """
        found = self.find_recursive_in_json_tree(path, json_object)
        if isinstance(found, list):
            return [self._create_single_object(factory, item, args) for item in found]
        if isinstance(found, dict):
            return [self._create_single_object(factory, found, args)]
        return []

    def create_objects_from_app_config_json(
        self, factory: Callable[..., T], path: str, *args: Any
    ) -> list[T]:
        """Build objects from the application configuration; see create_objects_from_json."""
        return self.create_objects_from_json(factory, self._config, path, *args)

    @staticmethod
    def _create_single_object(factory: Callable[..., T], json_object: Any, args: tuple) -> T:
        logger.debug("jsonObject to create an object from: %s", json.dumps(json_object))
        try:
            return factory(json_object, *args)
        except Exception as exc:
            logger.error(
                "Exception occurred during parsing json to an object. The corresponding "
                "object will be missing! Errormessage: %s",
                exc,
            )
            logger.warning(
                "default constructor will be used instead of failed initialization from json. "
                "Maybe the provided default values might be incorrect or unexpected in the "
                "context of the application. Try fixing your json input!"
            )
            return factory(*args)


_context = ApplicationContext()


def get_application_context() -> ApplicationContext:
    """Return the application-wide context."""
    return _context