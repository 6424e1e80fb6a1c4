from __future__ import annotations

"""
CLI entrypoint for the podcast transcript pipeline.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import sys
from dotenv import load_dotenv

from podcast_transcripts.actions.build import BuildAction
from podcast_transcripts.actions.chapters import ChaptersAction
from podcast_transcripts.actions.clean import CleanAction
from podcast_transcripts.actions.normalize import NormalizeAction
from podcast_transcripts.actions.sync import SyncAction
from podcast_transcripts.actions.template import TemplateAction
from podcast_transcripts.config import ConfigError, find_config_path, load_config
from podcast_transcripts.content import ContentError


def _action_repository():
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions = [
		TemplateAction(),
		NormalizeAction(),
		SyncAction(),
		ChaptersAction(),
		BuildAction(),
		CleanAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="podcast-transcripts",
		description=(
			"Normalize podcast transcripts into site content and build the JSON API and SEO files."
		),
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			"Path to podcast.yaml. If omitted, ./podcast.yaml in the current directory is used."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `2` on configuration, content or
		usage errors.

	Raises:
		SystemExit:
			When invoked via `python -m podcast_transcripts.app` (see module guard).
	"""
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config_path = find_config_path(getattr(args, "config", None))
			config = load_config(config_path)

		action.run(args, config)
		return 0
	except (ConfigError, ContentError) as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2


if __name__ == "__main__":
	raise SystemExit(main())
