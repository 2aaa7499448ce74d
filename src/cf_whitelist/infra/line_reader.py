"""Sequential line-by-line file reader.

Each non-empty line is handed to an async callback, and the callback is
awaited to completion before the next line is read, so at most one
callback is ever in flight.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

from cf_whitelist.exceptions import InputFileError, InputFileNotFoundError

LineCallback = Callable[[str], Awaitable[object]]


async def process_line_by_line(
    filepath: str | Path,
    callback: LineCallback,
) -> int:
    """Stream *filepath* and await ``callback(line)`` for each line.

    Line terminators (``\\n``, ``\\r\\n``, ``\\r``) are stripped; blank
    lines are skipped.  An exception raised by *callback* aborts the
    read immediately and propagates unchanged.

    Returns
    -------
    int
        Number of lines handed to *callback*.

    Raises
    ------
    InputFileNotFoundError
        If *filepath* does not exist.
    InputFileError
        If *filepath* cannot be opened or decoded.
    """
    path = Path(filepath)
    try:
        handle = path.open(encoding="utf-8-sig", newline=None)
    except FileNotFoundError as exc:
        raise InputFileNotFoundError(
            f"IP address file not found: {path}",
            hint="Create it with one IP address per line.",
        ) from exc
    except OSError as exc:
        raise InputFileError(f"Cannot open {path}: {exc}") from exc

    processed = 0
    with handle:
        while True:
            try:
                raw_line = handle.readline()
            except (OSError, UnicodeDecodeError) as exc:
                raise InputFileError(f"Cannot read {path}: {exc}") from exc
            if not raw_line:
                break

            line = raw_line.rstrip("\r\n")
            if not line:
                continue
            await callback(line)
            processed += 1
    return processed
