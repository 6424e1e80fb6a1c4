# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Inline timestamp normalization.

The subtitle-to-markdown tool writes speaker turns in several shapes:

1. `**Speaker**    *00:00*  text` (speaker, timestamp and text on one line)
2. `**Speaker**    *00:00*` (text on the next non-blank line)
3. `**Speaker**` followed by a `*00:00* ...` line within three lines
4. `*00:00*  text` on its own. Right after a chapter heading this inherits the
   previous speaker. Anywhere else it continues the open paragraph, so the
   timestamp is dropped and the remaining text is scanned again (it may hold
   another timestamp or a speaker label).

Every spoken turn is rewritten into the canonical annotated form defined in
`podcast_transcripts.transcripts.markup`. All other lines pass through unchanged,
which makes the transformation idempotent.
"""

from dataclasses import dataclass
from enum import Enum

from podcast_transcripts.transcripts.markup import (
    HEADING_PREFIX,
    SPEAKER_ONLY_RE,
    SPEAKER_TIMESTAMP_RE,
    SPEAKER_TIMESTAMP_TEXT_RE,
    TIMESTAMP_LIKE_RE,
    TIMESTAMP_LINE_RE,
    TIMESTAMP_ONLY_RE,
    TIMESTAMP_TEXT_RE,
    render_annotated_line,
)


# Number of lines after a lone speaker label that may hold its timestamp line.
SPEAKER_LOOKAHEAD_LINES = 3


class LineKind(Enum):
    """Line shapes in the order they are tested."""

    HEADING = "heading"
    BLANK = "blank"
    SPEAKER_TIMESTAMP_TEXT = "speaker_timestamp_text"
    SPEAKER_TIMESTAMP = "speaker_timestamp"
    SPEAKER_ONLY = "speaker_only"
    TIMESTAMP = "timestamp"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class LineShape:
    """Classification result for a single source line.

    Attributes:
        kind:
            The matched shape.
        speaker:
            Speaker label for the speaker shapes.
        time_code:
            Time code for the timestamp shapes.
        text:
            Spoken text following the markup (may be empty).
    """

    kind: LineKind
    speaker: str | None = None
    time_code: str | None = None
    text: str = ""


@dataclass
class _ScanState:
    last_speaker: str | None = None
    after_heading: bool = False


def classify_line(line: str) -> LineShape:
    """Classify a source line (without line terminator) by its markup shape."""

    if line.startswith(HEADING_PREFIX):
        return LineShape(LineKind.HEADING)

    if not line.strip():
        return LineShape(LineKind.BLANK)

    match = SPEAKER_TIMESTAMP_TEXT_RE.match(line)
    if match:
        return LineShape(
            LineKind.SPEAKER_TIMESTAMP_TEXT,
            speaker=match.group("speaker"),
            time_code=match.group("time"),
            text=match.group("text"),
        )

    match = SPEAKER_TIMESTAMP_RE.match(line)
    if match:
        return LineShape(
            LineKind.SPEAKER_TIMESTAMP,
            speaker=match.group("speaker"),
            time_code=match.group("time"),
        )

    match = SPEAKER_ONLY_RE.match(line)
    if match:
        return LineShape(LineKind.SPEAKER_ONLY, speaker=match.group("speaker"))

    match = TIMESTAMP_LINE_RE.match(line)
    if match:
        return LineShape(LineKind.TIMESTAMP, time_code=match.group("time"), text=match.group("text"))

    return LineShape(LineKind.UNMATCHED)


def _is_markup_line(line: str) -> bool:
    return line.startswith(HEADING_PREFIX) or line.startswith("**") or bool(TIMESTAMP_LIKE_RE.match(line))


def find_next_content_line(lines: list[str], start: int) -> tuple[str, int] | None:
    """Find the spoken text that belongs to a turn without inline text.

    Blank lines are skipped. If the first non-blank line is a heading, a speaker
    line or a timestamp line, the turn has no text of its own.

    Args:
        lines:
            Source lines with line terminators removed.
        start:
            Index of the first line to inspect.

    Returns:
        A tuple `(text, consumed)` where `consumed` counts the skipped blank lines
        plus the text line itself, or None if no text line was found.
    """

    for idx in range(start, len(lines)):
        candidate = lines[idx]
        if not candidate.strip():
            continue
        if _is_markup_line(candidate):
            return None
        return candidate, idx - start + 1

    return None


def _find_speaker_timestamp(lines: list[str], speaker_idx: int) -> tuple[int, LineShape] | None:
    """Locate the timestamp line for a lone speaker label.

    Only the next `SPEAKER_LOOKAHEAD_LINES` lines are inspected and the search
    stops at the first non-blank line.
    """

    end = min(speaker_idx + 1 + SPEAKER_LOOKAHEAD_LINES, len(lines))
    for idx in range(speaker_idx + 1, end):
        candidate = lines[idx]
        if not candidate.strip():
            continue
        if not TIMESTAMP_LIKE_RE.match(candidate):
            return None

        match = TIMESTAMP_TEXT_RE.match(candidate)
        if match:
            return idx, LineShape(LineKind.TIMESTAMP, time_code=match.group("time"), text=match.group("text"))
        match = TIMESTAMP_ONLY_RE.match(candidate)
        if match:
            return idx, LineShape(LineKind.TIMESTAMP, time_code=match.group("time"))
        return None

    return None


def _emit_turn(lines: list[str], idx: int, time_code: str, speaker: str, text: str, out: list[str]) -> int:
    """Append an annotated turn and return the index of the last consumed line.

    When `text` is empty the next content line is pulled in as the spoken text.
    """

    if not text:
        found = find_next_content_line(lines, idx + 1)
        if found is not None:
            text, consumed = found
            idx += consumed

    out.append(render_annotated_line(time_code, speaker, text))
    return idx


def normalize_inline_timestamps(markdown: str) -> str:
    """Rewrite inline speaker/timestamp markup into the canonical annotated form.

    Args:
        markdown:
            Transcript markdown as produced by the subtitle-to-markdown tool.

    Returns:
        Markdown where every spoken turn starts with a timestamp tag and, for new
        speaker turns, a bold speaker label.
    """

    lines = [line[:-1] if line.endswith("\r") else line for line in markdown.split("\n")]
    out: list[str] = []
    state = _ScanState()

    idx = 0
    while idx < len(lines):
        line = lines[idx]
        shape = classify_line(line)

        speaker_timestamp: tuple[int, LineShape] | None = None
        if shape.kind is LineKind.SPEAKER_ONLY:
            speaker_timestamp = _find_speaker_timestamp(lines, idx)

        if shape.kind is LineKind.HEADING:
            state.after_heading = True
            out.append(line)

        elif shape.kind is LineKind.BLANK:
            out.append(line)

        elif shape.kind in (LineKind.SPEAKER_TIMESTAMP_TEXT, LineKind.SPEAKER_TIMESTAMP):
            state.last_speaker = shape.speaker
            state.after_heading = False
            idx = _emit_turn(lines, idx, shape.time_code or "", shape.speaker or "", shape.text, out)

        elif speaker_timestamp is not None:
            ts_idx, ts_shape = speaker_timestamp
            state.last_speaker = shape.speaker
            state.after_heading = False
            idx = _emit_turn(lines, ts_idx, ts_shape.time_code or "", shape.speaker or "", ts_shape.text, out)

        elif shape.kind is LineKind.TIMESTAMP:
            if state.after_heading and state.last_speaker:
                idx = _emit_turn(lines, idx, shape.time_code or "", state.last_speaker, shape.text, out)
            elif shape.text:
                # Drop the time code and scan the remainder again as its own line.
                state.after_heading = False
                lines[idx] = shape.text
                continue
            state.after_heading = False

        else:
            # Unmatched content, or a speaker label without a timestamp nearby.
            state.after_heading = False
            out.append(line)

        idx += 1

    return "\n".join(out)
