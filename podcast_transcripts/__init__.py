"""
Podcast transcript pipeline.

This package contains a small CLI tool for a static podcast website that:
- normalizes speaker/timestamp markup of generated transcripts into site content,
- parses stored transcripts back into speaker-attributed chapter transcripts,
- writes the static JSON API, RSS feeds, sitemap, SEO head data and llms.txt.
"""
