"""Env file source backed by python-dotenv.

The file is opened here rather than by python-dotenv so that OS failures
(missing file, permission denied) surface as exceptions with an errno
instead of being silently ignored.
"""

import errno
from pathlib import Path

from dotenv import dotenv_values


def read_env_file(path: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """Read and parse a ``KEY=VALUE`` file without touching the environment.

    Comments, quoting and ``export`` prefixes follow python-dotenv. Values are
    taken literally: ``${VAR}`` is not expanded, since expansion would read
    ``os.environ`` and ignore the caller's override rule. Keys declared
    without ``=`` have no value and are dropped, as ``load_dotenv`` does.

    Args:
        path: Path to the env file.
        encoding: Text encoding of the file.

    Returns:
        Mapping of parsed keys to string values. Empty values are kept.

    Raises:
        OSError: If the file cannot be opened; ``errno`` identifies the cause.
        UnicodeDecodeError: If the file is not valid in the given encoding.
    """
    with open(path, encoding=encoding) as stream:
        parsed = dotenv_values(stream=stream, interpolate=False)

    return {key: value for key, value in parsed.items() if value is not None}


def error_code(error: BaseException) -> str | None:
    """Return the symbolic errno name carried by an exception, if any.

    Example:
        >>> error_code(FileNotFoundError(errno.ENOENT, "No such file"))
        'ENOENT'
    """
    number = getattr(error, "errno", None)
    if not isinstance(number, int):
        return None
    return errno.errorcode.get(number)
