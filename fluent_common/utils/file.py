"""Plain-text file writer bound to one output directory.

Files are written as UTF-8. Write failures are logged and returned as a failed
:class:`Outcome`; nothing is cleaned up after a partial write.
"""

from __future__ import annotations

import os
from pathlib import Path

from fluent_common.config import TEXT_ENCODING, setup_logging
from fluent_common.exceptions import FileHandlingError
from fluent_common.outcome import Outcome

logger = setup_logging(__name__)

__all__ = ["FluentFile"]


class FluentFile:
    """Write text files under ``output_dir``.

    The directory (and any missing parents) is created on construction.
    """

    def __init__(self, output_dir: str | os.PathLike[str]) -> None:
        if not output_dir or not str(output_dir).strip():
            msg = "Output directory is required."
            raise ValueError(msg)
        self._output_dir = Path(output_dir)
        self._output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def write(self, file_name: str, extension: str, content: str) -> Outcome[Path]:
        """Write ``content`` to ``output_dir / (file_name + extension)``.

        Parameters
        ----------
        file_name : str
            Base name without extension.
        extension : str
            Extension including its dot (e.g. ``".txt"``); may be empty.
        content : str
            Text to write.

        Returns
        -------
        Outcome[Path]
            The written path, or a :class:`FileHandlingError` on ``OSError``.

        Raises
        ------
        ValueError
            If ``file_name`` is empty or any argument is ``None``.
        """
        if not file_name:
            msg = "File name is required."
            raise ValueError(msg)
        if extension is None or content is None:
            msg = "Extension and content are required."
            raise ValueError(msg)

        filepath = self._output_dir / f"{file_name}{extension}"
        try:
            with filepath.open("w", encoding=TEXT_ENCODING, newline="") as f:
                f.write(content)
        except OSError as exc:
            logger.warning("Could not write %s: %s", filepath, exc)
            error = FileHandlingError(f"Could not write {filepath}: {exc}")
            error.__cause__ = exc
            return Outcome.failure(error)

        logger.info("Saved text file: %s", filepath)
        return Outcome.success(filepath)

    @staticmethod
    def file_separator() -> str:
        return os.sep

    @staticmethod
    def new_line() -> str:
        return os.linesep

    def __repr__(self) -> str:
        return f"FluentFile(output_dir={str(self._output_dir)!r})"
