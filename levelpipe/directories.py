"""The directory layout of an application: root, pipelines, processes and worker modules."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .systemutils import (
    PATH_SEPARATOR,
    DirectoryCreationError,
    create_directory,
    get_current_working_directory,
    replace_env_variables_in_path,
)

logger = logging.getLogger(__name__)

DEFAULT_PIPELINES_DIR = "pipelines.d"
DEFAULT_PROCESSES_DIR = "processes.d"
DEFAULT_WORKER_MODULES_DIR = "lib"


def _text(json_object: Mapping[str, Any], key: str) -> str:
    value = json_object[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, not {type(value).__name__}")
    return value


class ApplicationDirectories:
    """Directories of an application, all placed below one root directory.

    Without a JSON object the root is the current working directory and the
    sub-directories get their default names. A JSON object must hold the
    string members ``root``, ``pipelines``, ``processes`` and
    ``workerModules``; ``$NAME`` sections of the root are replaced by the
    values of environment variables.
    """

    def __init__(self, json_object: Mapping[str, Any] | None = None) -> None:
        if json_object is None:
            root = get_current_working_directory() or "."
            pipelines = DEFAULT_PIPELINES_DIR
            processes = DEFAULT_PROCESSES_DIR
            worker_modules = DEFAULT_WORKER_MODULES_DIR
        else:
            root = replace_env_variables_in_path(_text(json_object, "root"))
            pipelines = _text(json_object, "pipelines")
            processes = _text(json_object, "processes")
            worker_modules = _text(json_object, "workerModules")
        self._root = Path(root)
        self._pipelines = Path(f"{root}{PATH_SEPARATOR}{pipelines}")
        self._processes = Path(f"{root}{PATH_SEPARATOR}{processes}")
        self._worker_modules = Path(f"{root}{PATH_SEPARATOR}{worker_modules}")

    @property
    def application_root_dir(self) -> Path:
        return self._root

    @property
    def pipelines_dir(self) -> Path:
        return self._pipelines

    @property
    def processes_dir(self) -> Path:
        return self._processes

    @property
    def worker_modules_dir(self) -> Path:
        return self._worker_modules

    def create_application_directories(self) -> bool:
        """Create every directory that is missing; True if all of them exist afterwards."""
        all_exist = True
        for directory in (
            self._root,
            self._pipelines,
            self._processes,
            self._worker_modules,
        ):
            try:
                create_directory(directory)
            except DirectoryCreationError as exc:
                logger.error("%s", exc)
                all_exist = False
        return all_exist