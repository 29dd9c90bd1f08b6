"""fluent-common: small utilities around catalogs, files and worksheets.

Architecture
------------
* ``catalog``: immutable ``(code, tag)`` enums for brackets, quotes, escapes,
  HTML tags, path separators and indentation.
* ``utils``: reflective method invocation, a forward-only iterator and a
  UTF-8 text file writer.
* ``sheet``: A1 references and the ``FluentSheet`` facade over openpyxl
  worksheets (cell access, search, border regions, bean marshaling).
* ``outcome`` / ``exceptions``: the result type and error hierarchy.

Configuration
-------------
``OUTPUT_DIR``, ``LOGS_DIR``, ``LOG_LEVEL`` and ``LOG_TO_FILE`` are read from
the environment (or ``.env``); see :mod:`fluent_common.config`.

Examples
--------
Dump the active sheet of a workbook:

    >>> python -m fluent_common.main_dump book.xlsx -o out
"""

from fluent_common.exceptions import (
    BeanMappingError,
    FileHandlingError,
    FluentCommonError,
    ReflectionError,
    SheetHandlingError,
)
from fluent_common.outcome import Outcome

__version__ = "0.1.0"
__all__ = [
    "BeanMappingError",
    "FileHandlingError",
    "FluentCommonError",
    "Outcome",
    "ReflectionError",
    "SheetHandlingError",
    "__version__",
]


def get_version() -> str:
    """Return the current package version string.

    Returns
    -------
    str
        Semantic version identifier (e.g., ``"0.1.0"``).
    """
    return __version__


__all__.append("get_version")
