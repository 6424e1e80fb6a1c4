# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Canonical transcript markup.

The normalizer writes spoken lines in exactly one shape and the chapter parser
reverses that shape, so both sides share the patterns defined here:

    <span class="paragraph-timestamp" data-ts="05:30">05:30</span> **Host** Hello

The speaker label and the text are optional. Lines without a timestamp tag are
continuations of the previously opened paragraph.
"""

import re


# `M:SS`, `MM:SS` or `H:MM:SS` with ASCII digits only. The literal text is reused verbatim.
TIME_CODE = r"[0-9]{1,2}:[0-9]{2}(?::[0-9]{2})?"

# Level-2 chapter heading with its time code: `## Title    *MM:SS*`
CHAPTER_HEADING_RE = re.compile(rf"^## (?P<title>.+?)\s{{2,}}\*(?P<time>{TIME_CODE})\*\s*$")

# Any line that opens a chapter for the normalizer, with or without time code.
HEADING_PREFIX = "## "

# Canonical timestamp tags anywhere on a line, including trailing whitespace.
SPAN_TIMESTAMP_RE = re.compile(r'<span\s+class="paragraph-timestamp"[^>]*>[^<]*</span>\s*')

# Italic timestamp at line start like `*00:00*`, left over from unconverted input.
ITALIC_TIMESTAMP_RE = re.compile(rf"^\*{TIME_CODE}\*\s*")

# Leading bold speaker name like `**Name**`.
BOLD_SPEAKER_RE = re.compile(r"^\*\*(?P<speaker>.+?)\*\*\s*")

# Source shapes recognized by the normalizer (see `normalizer.classify_line`).
SPEAKER_TIMESTAMP_TEXT_RE = re.compile(
    rf"^\*\*(?P<speaker>[^*]+)\*\*\s+\*(?P<time>{TIME_CODE})\*\s+(?P<text>.+)$"
)
SPEAKER_TIMESTAMP_RE = re.compile(rf"^\*\*(?P<speaker>[^*]+)\*\*\s+\*(?P<time>{TIME_CODE})\*\s*$")
SPEAKER_ONLY_RE = re.compile(r"^\*\*(?P<speaker>[^*]+)\*\*\s*$")
TIMESTAMP_TEXT_RE = re.compile(rf"^\*(?P<time>{TIME_CODE})\*\s+(?P<text>.+)$")
TIMESTAMP_ONLY_RE = re.compile(rf"^\*(?P<time>{TIME_CODE})\*\s*$")
TIMESTAMP_LINE_RE = re.compile(rf"^\*(?P<time>{TIME_CODE})\*\s*(?P<text>.*)$")

# Loose "this looks like a timestamp line" check (an asterisk followed by a digit).
TIMESTAMP_LIKE_RE = re.compile(r"^\*[0-9]")


def timestamp_tag(time_code: str) -> str:
    """Return the clickable timestamp tag for a time code."""

    return f'<span class="paragraph-timestamp" data-ts="{time_code}">{time_code}</span>'


def render_annotated_line(time_code: str, speaker: str | None = None, text: str | None = None) -> str:
    """Render one canonical spoken line.

    Args:
        time_code:
            Time code used as both the `data-ts` attribute and the label.
        speaker:
            Optional speaker label, rendered in bold.
        text:
            Optional spoken text.

    Returns:
        The annotated line without a trailing newline.
    """

    parts = [timestamp_tag(time_code)]
    if speaker:
        parts.append(f"**{speaker}**")
    if text:
        parts.append(text)
    return " ".join(parts)
