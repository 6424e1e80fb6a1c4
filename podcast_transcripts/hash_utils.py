# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hash utilities.

MD5 is used only to detect whether a generated file would change. It is not used
for cryptographic security.
"""

from pathlib import Path
import hashlib


def _new_md5() -> "hashlib._Hash":
    # FIPS builds reject MD5 unless it is flagged as non-security use.
    try:
        return hashlib.md5(usedforsecurity=False)  # type: ignore[call-arg]
    except TypeError:
        return hashlib.md5()


def md5_text(text: str) -> str:
    """Compute an MD5 hex digest for a text string (UTF-8 encoded)."""

    hasher = _new_md5()
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()


def file_md5(path: Path) -> str | None:
    """Return the MD5 hex digest of a file, or None if it does not exist."""

    if not path.is_file():
        return None

    hasher = _new_md5()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def text_matches_file(text: str, path: Path) -> bool:
    """Return True if writing `text` to `path` would not change the file."""

    return file_md5(path) == md5_text(text)
