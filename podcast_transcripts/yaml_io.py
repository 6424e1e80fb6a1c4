# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""YAML I/O helpers.

Front matter handling for the `.mdx` content records. A record starts with a
fenced YAML block:

    ---
    episodeNumber: 83
    title: ...
    ---

    <body>
"""

import re
from typing import Any

import yaml


_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?P<yaml>.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(?P<body>.*)\Z", re.S)


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Split a document into its raw front matter and body.

    Returns:
        `(front_matter, body)`. `front_matter` is None if the document does not
        start with a `---` fence.
    """

    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return None, text
    return match.group("yaml"), match.group("body")


def dump_front_matter(data: dict[str, Any]) -> str:
    """Render a mapping as a fenced front matter block followed by a blank line.

    Key order is preserved and non-ASCII text is written as-is.
    """

    rendered = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return f"---\n{rendered}---\n\n"
