# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Chapter/transcript parser.

Turns the canonical markdown body of an episode back into chapter records with
plain-text transcripts for the JSON API.

Rules:
- A `## Title  *MM:SS*` heading starts a new chapter.
- Content before the first heading belongs to an implicit `Intro` chapter at
  `00:00`. It is dropped when it holds no spoken text.
- A line with a bold speaker label starts a new paragraph `Speaker: text`.
- A line without a label continues the open paragraph.
- A blank line closes the open paragraph.

Unrecognized markup is never an error. It simply ends up as transcript text.
"""

from dataclasses import dataclass, field
from typing import Any

from podcast_transcripts.transcripts.markup import (
    BOLD_SPEAKER_RE,
    CHAPTER_HEADING_RE,
    ITALIC_TIMESTAMP_RE,
    SPAN_TIMESTAMP_RE,
)


INTRO_TIME = "00:00"
INTRO_TITLE = "Intro"


@dataclass(frozen=True)
class ChapterBlock:
    """One chapter of an episode transcript.

    Attributes:
        time:
            Chapter start as written in the heading (`M:SS`, `MM:SS` or `H:MM:SS`).
        title:
            Chapter title.
        speakers:
            Distinct speaker labels in order of first appearance.
        transcript:
            Paragraphs separated by a blank line. Each paragraph is a single line.
    """

    time: str
    title: str
    speakers: list[str] = field(default_factory=list)
    transcript: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON API representation."""

        return {
            "time": self.time,
            "title": self.title,
            "speakers": list(self.speakers),
            "transcript": self.transcript,
        }


@dataclass
class _RawChapter:
    time: str
    title: str
    implicit: bool = False
    body_lines: list[str] = field(default_factory=list)


def _split_raw_chapters(lines: list[str]) -> list[_RawChapter]:
    raw_chapters: list[_RawChapter] = []
    current: _RawChapter | None = None

    for line in lines:
        heading = CHAPTER_HEADING_RE.match(line)
        if heading:
            if current is not None:
                raw_chapters.append(current)
            current = _RawChapter(time=heading.group("time"), title=heading.group("title"))
            continue

        if current is None:
            current = _RawChapter(time=INTRO_TIME, title=INTRO_TITLE, implicit=True)
        current.body_lines.append(line)

    if current is not None:
        raw_chapters.append(current)

    return raw_chapters


def _reduce_body(body_lines: list[str]) -> tuple[list[str], str]:
    """Reduce chapter body lines to its speakers and plain-text transcript."""

    speakers: list[str] = []
    paragraphs: list[str] = []
    fragments: list[str] = []

    def flush() -> None:
        if fragments:
            paragraphs.append(" ".join(fragments))
            fragments.clear()

    for raw_line in body_lines:
        line = SPAN_TIMESTAMP_RE.sub("", raw_line)
        line = ITALIC_TIMESTAMP_RE.sub("", line, count=1)

        speaker: str | None = None
        match = BOLD_SPEAKER_RE.match(line)
        if match:
            speaker = match.group("speaker")
            if speaker not in speakers:
                speakers.append(speaker)
            line = line[match.end():]

        line = line.strip()

        if not line:
            flush()
        elif speaker:
            flush()
            fragments.append(f"{speaker}: {line}")
        else:
            fragments.append(line)

    flush()

    transcript = "\n\n".join(p for p in paragraphs if p)
    return speakers, transcript


def parse_chapters(body: str) -> list[ChapterBlock]:
    """Parse a canonical episode body into chapter blocks.

    Args:
        body:
            Markdown body of an episode (everything after the front matter).

    Returns:
        Chapter blocks in source order.
    """

    chapters: list[ChapterBlock] = []

    for raw in _split_raw_chapters(body.split("\n")):
        speakers, transcript = _reduce_body(raw.body_lines)

        if raw.implicit and not transcript:
            continue

        chapters.append(
            ChapterBlock(
                time=raw.time,
                title=raw.title,
                speakers=speakers,
                transcript=transcript,
            )
        )

    return chapters
