"""Writing report files into the results folder."""

import os
from pathlib import Path
from typing import Optional, Union

from .config import (
    DEFAULT_OUTPUT_FOLDER,
    FILE_PERMISSION,
    OUTPUT_FOLDER_ENV_KEY,
    RESULTS_PATH_ENV_KEY,
)


def get_output_folder_name() -> str:
    """Name of the results folder, taken from the environment when set."""
    return os.environ.get(OUTPUT_FOLDER_ENV_KEY) or DEFAULT_OUTPUT_FOLDER


def get_result_path() -> str:
    """Path of the results folder, built from the environment."""
    base = os.environ.get(RESULTS_PATH_ENV_KEY, "")
    folder = get_output_folder_name()
    if base:
        return f"{base}/{folder}"
    return f"./{folder}"


class FileManager:
    """Creates files in a results folder, making the folder when needed."""

    def __init__(self, results_path: Optional[str] = None):
        self.results_path = results_path if results_path is not None else get_result_path()
        self.create_output_dir()

    def create_output_dir(self) -> None:
        """Create the results folder if it does not exist yet."""
        os.makedirs(self.results_path, exist_ok=True)

    def create_file(self, name: str, content: Union[bytes, str]) -> Path:
        """Write ``content`` to ``name`` inside the results folder."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        path = Path(self.results_path) / name
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_PERMISSION)
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
        return path