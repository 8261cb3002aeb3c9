"""Helpers for environment variables, path strings and directories."""

from __future__ import annotations

import os
from pathlib import Path

PATH_SEPARATOR = "/"


class DirectoryCreationError(OSError):
    """Raised when a directory cannot be created."""


def read_env(variable_name: str) -> str | None:
    """Return the value of an environment variable, or None if it is unset."""
    return os.environ.get(variable_name)


def get_current_working_directory() -> str | None:
    """Return the current working directory, or None if it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return None


def split_string(to_split: str, separator: str) -> list[str]:
    """Split a string at a separator.

    One trailing and one leading separator are ignored; empty sections
    between two adjacent separators are kept.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if to_split.endswith(separator):
        to_split = to_split[: -len(separator)]
    parts = to_split.split(separator)
    if to_split.startswith(separator):
        parts = parts[1:]
    return parts


def replace_env_variables_in_path(path: str) -> str:
    """Replace every path section of the form ``$NAME`` with the variable's value.

    Sections naming an unset variable are left untouched. The result is the
    sections joined by the path separator, without a leading separator.
    """
    sections = split_string(path, PATH_SEPARATOR)
    return PATH_SEPARATOR.join(
        os.environ.get(section[1:], section) if section.startswith("$") else section
        for section in sections
    )


def create_directory(directory_name: str | os.PathLike[str]) -> Path:
    """Make sure a directory exists, creating missing parents as well."""
    path = Path(directory_name)
    if path.is_dir():
        return path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"trying to create target directory: {directory_name} "
            f"success: false - exception has been thrown: {exc}"
        ) from exc
    return path