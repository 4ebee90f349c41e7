#!/usr/bin/env python3
"""
Series Renamer - command line front end

Fetch one season from OMDb, pick an episode for each file in a folder,
then rename the files in place.
"""
import argparse
import logging
import sys
import time
from pathlib import Path

from .models import Episode, LocalFile, RenameFailure
from .planner import build_plan
from .session import Session
from .settings import SettingsManager, load_api_key

POLL_INTERVAL = 0.1


def print_episodes(episodes: list[Episode]) -> None:
    """Print the fetched episode list."""
    print("\nEpisodes:")
    print("-" * 50)
    for episode in episodes:
        print(f"  {episode.episode_label:>3}. {episode.title}")
    print()


def prompt_episode(file: LocalFile, episodes: list[Episode]) -> Episode | None:
    """
    Ask which episode a file is.

    Args:
        file: The file to place
        episodes: Fetched episodes

    Returns:
        Selected episode or None to leave the file unassigned
    """
    by_label = {episode.episode_label.strip(): episode for episode in episodes}

    while True:
        choice = input(f"Episode for '{file.name}' [skip]: ").strip()
        if not choice:
            return None
        if choice in by_label:
            return by_label[choice]
        # Accept "3" for a catalog label of "03" and the other way round
        if choice.isascii() and choice.isdigit():
            for label, episode in by_label.items():
                if label.isascii() and label.isdigit() and int(label) == int(choice):
                    return episode
        print("Unknown episode. Try again.")


def confirm_proceed(count: int) -> bool:
    """
    Ask user to confirm proceeding with rename.

    Args:
        count: Number of files to rename

    Returns:
        True if user confirms, False otherwise
    """
    while True:
        response = input(f"\nProceed with renaming {count} files? (y/n): ").strip().lower()
        if response in ('y', 'yes'):
            return True
        if response in ('n', 'no'):
            return False
        print("Please enter 'y' or 'n'.")


def wait_for_fetch(session: Session) -> None:
    """Tick the session until its fetch attempt ends."""
    while session.is_fetching:
        if not session.tick():
            time.sleep(POLL_INTERVAL)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="series-renamer",
        description="Rename episode files using OMDb season listings."
    )

    parser.add_argument(
        "link",
        help="IMDb link (or bare tt... identifier) of the show"
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Folder containing the episode files"
    )
    parser.add_argument(
        "--season", "-s",
        type=int,
        default=1,
        help="Season number (default: 1)"
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="OMDb API key (default: OMDB_API_KEY, .env or settings file)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be renamed without actually renaming"
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Don't ask for confirmation before renaming"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )

    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="  [%(levelname)s] %(name)s: %(message)s",
    )

    if not parsed_args.path.is_dir():
        print(f"Error: Not a directory: {parsed_args.path}")
        return 1
    if parsed_args.season < 0:
        print("Error: Season must not be negative")
        return 1

    settings = SettingsManager()
    api_key = parsed_args.api_key or load_api_key(settings)
    if not api_key:
        print(
            "Error: OMDb API key not found.\n"
            "Set it using one of these methods:\n"
            "  1. Environment variable: export OMDB_API_KEY=your_key\n"
            "  2. Create a .env file with: OMDB_API_KEY=your_key\n"
            f"  3. Edit {settings.path}\n"
            "Get a key at: https://www.omdbapi.com/apikey.aspx"
        )
        return 1

    session = Session(
        link=parsed_args.link,
        directory=str(parsed_args.path),
        season=parsed_args.season,
        api_key=api_key,
    )

    if not session.start_fetch():
        print(f"Error: {session.status}")
        return 1
    print(session.status)
    wait_for_fetch(session)

    if session.error:
        print(f"Error: {session.error}")
        return 1
    print(session.status)

    settings.set("last_link", parsed_args.link)
    settings.set("last_folder", str(parsed_args.path))
    settings.set("last_season", parsed_args.season)
    settings.save()

    episodes = session.model.episodes
    if not episodes:
        print("No episodes listed for this season.")
        return 0
    if not session.model.unassigned:
        print("No files found.")
        return 0

    print_episodes(episodes)
    for file in session.model.unassigned:
        episode = prompt_episode(file, episodes)
        if episode is not None:
            session.assign(file, episode)

    entries, unnamed = build_plan(session.model.confirmed_plan(), session.season)

    print()
    for entry in entries:
        print(f"  {entry.file.name}")
        print(f"  -> {entry.target_name}")
    for _episode, file in unnamed:
        print(f"  [SKIP] {file.name}")
        print("         Reason: missing extension")

    if parsed_args.dry_run:
        print("-" * 50)
        print(f"Would rename: {len(entries)} files")
        return 0

    if not entries:
        print("-" * 50)
        print("No files to rename.")
        return 0

    if not parsed_args.yes and not confirm_proceed(len(entries)):
        print("Cancelled.")
        return 0

    outcomes = session.confirm()
    print()
    print(session.report)

    return 1 if any(isinstance(o, RenameFailure) for o in outcomes) else 0


if __name__ == "__main__":
    sys.exit(main())
