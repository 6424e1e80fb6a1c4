"""Transcript markup handling.

Episode transcripts pass through two transformations:

- `normalize_inline_timestamps`: rewrites the speaker/timestamp notations of the
  transcript tool into one canonical annotated form (at sync time).
- `parse_chapters`: reads the canonical form back into chapter records with
  speaker-attributed plain-text transcripts (at build time).

Both sides share the markup definitions in `markup`.
"""

from podcast_transcripts.transcripts.chapter_file import ChapterHeading, parse_chapters_file
from podcast_transcripts.transcripts.chapters import ChapterBlock, parse_chapters
from podcast_transcripts.transcripts.normalizer import normalize_inline_timestamps

__all__ = [
    "ChapterBlock",
    "ChapterHeading",
    "normalize_inline_timestamps",
    "parse_chapters",
    "parse_chapters_file",
]
