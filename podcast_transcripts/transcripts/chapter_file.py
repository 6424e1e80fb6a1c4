# Podcast Transcripts
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Chapter list file parser.

The transcript tool writes a hand-edited chapter list next to each episode:

    00:00:00 Opening
    00:12:30 Scaling laws
    1:02:03 Wrap-up

Times with hours are folded into minutes (`1:02:03` becomes `62:03`) so that the
chapter list in the front matter always uses the `MM:SS` form.
"""

from dataclasses import dataclass
from pathlib import Path
import re

from podcast_transcripts.transcripts.markup import TIME_CODE


_CHAPTER_LINE_RE = re.compile(rf"^(?P<time>{TIME_CODE})\s+(?P<title>.+)$")


@dataclass(frozen=True)
class ChapterHeading:
    """Chapter start time and title as listed in the front matter."""

    time: str
    title: str

    def to_dict(self) -> dict[str, str]:
        return {"time": self.time, "title": self.title}


def fold_hours(time_code: str) -> str:
    """Convert `H:MM:SS` into `M:SS` by folding hours into minutes.

    Two-part time codes are returned unchanged. The minutes are not zero padded
    (`00:05:10` becomes `5:10`).
    """

    parts = time_code.split(":")
    if len(parts) != 3:
        return time_code

    hours = int(parts[0])
    minutes = int(parts[1])
    return f"{hours * 60 + minutes}:{parts[2]}"


def parse_chapter_lines(text: str) -> list[ChapterHeading]:
    """Parse the chapter list format. Lines that do not match are skipped."""

    chapters: list[ChapterHeading] = []
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue

        match = _CHAPTER_LINE_RE.match(trimmed)
        if match is None:
            continue

        chapters.append(
            ChapterHeading(
                time=fold_hours(match.group("time")),
                title=match.group("title").strip(),
            )
        )

    return chapters


def parse_chapters_file(path: Path) -> list[ChapterHeading]:
    """Read and parse a chapter list file.

    A missing file is not an error: a warning is printed and an empty list is
    returned so the episode can still be synced.
    """

    if not path.exists():
        print(f"WARNING: Chapters file not found: {path}")
        return []

    return parse_chapter_lines(path.read_text(encoding="utf-8"))
