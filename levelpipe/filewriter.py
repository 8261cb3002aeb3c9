"""Writes payloads into files of a target directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .systemutils import create_directory

logger = logging.getLogger(__name__)

UNNAMED_FILE = "unnamed"
FILE_SUFFIX = ".dat"
TMP_SUFFIX = ".tmp"


class FileWriter:
    """Writes data into ``<target directory>/<name>.dat`` through a temporary file."""

    def __init__(self, target_directory: str | os.PathLike[str] | None) -> None:
        self.target_directory = os.fspath(target_directory) if target_directory else ""
        if not self.target_directory:
            logger.error(
                "Failed loading init parameter for targetDirectory. "
                "Storing of files will stay disabled!"
            )
        else:
            logger.info("file connector configured to write files to: %s", self.target_directory)

    def create_file_name(
        self, output_file_name: str | None = None, transaction_id: str | None = None
    ) -> Path:
        """The output file's path, named after the file name, the transaction id or 'unnamed'."""
        name = output_file_name or transaction_id or UNNAMED_FILE
        path = Path(f"{self.target_directory}/{name}{FILE_SUFFIX}")
        logger.debug("writing file as: %s", path)
        return path

    def write_file(
        self,
        content: str | bytes | None,
        output_file_name: str | None = None,
        transaction_id: str | None = None,
    ) -> Path | None:
        """Write content to its file and return the file's path.

        Missing content gives an empty file. Without a target directory
        nothing is written and None is returned.
        """
        if not self.target_directory:
            logger.warning("no target directory configured. Nothing will be written!")
            return None
        create_directory(self.target_directory)
        path = self.create_file_name(output_file_name, transaction_id)
        if content is None:
            logger.warning("no payload found in processing data. Output file will be empty!")
            content = b""
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        tmp_path = path.with_name(path.name + TMP_SUFFIX)
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError as exc:
            logger.error("failed writing file: %s : %s", tmp_path, exc)
            raise
        return path