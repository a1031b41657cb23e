"""Single-line description of a target path (``-d``)."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from lse import FilesystemError


def describe(target: str | Path) -> str:
    """Describe ``target`` itself rather than its contents.

    One trailing separator (``os.sep`` or ``os.altsep``) is stripped, then
    a single ``os.sep`` is added back when ``target`` is a directory.

    Raises:
        FilesystemError: If ``target`` does not exist or cannot be stat'd.
    """
    text = str(target)
    try:
        st = os.stat(text)
    except OSError as exc:
        raise FilesystemError.from_os_error(text, exc) from exc

    separators = tuple(sep for sep in (os.sep, os.altsep) if sep)
    if text.endswith(separators):
        text = text[:-1]
    if stat.S_ISDIR(st.st_mode):
        text += os.sep
    return text
