#!/usr/bin/env python3
"""
Script to check the stored favorites and reset them when they can no longer be read
"""

import argparse
import logging
import sys

from flix.backend.config import FAVORITES_KEY, SETTINGS_FILE, configure_logging
from flix.backend.favorites_storage import FavoritesStore
from flix.backend.Movie import DecodeError
from flix.backend.settings_store import JsonFileSettingsStore

logger = logging.getLogger(__name__)


def repair_favorites(store: FavoritesStore, reset: bool = False) -> int:
    """
    Load the favorites and report on them.
    Returns the process exit code: 1 if the slot is corrupt and was left as is.
    """
    try:
        favorites = store.load_all()
    except DecodeError as e:
        print(f"✗ Favorites under {store.key!r} are corrupt: {e}")
        if not reset:
            print("Run again with --reset to replace them with an empty list")
            return 1
        store.clear()
        logger.info("Reset corrupt favorites under %r", store.key)
        print("✓ Favorites have been reset")
        return 0

    print(f"✓ Found {len(favorites)} favorite movies")
    for i, movie in enumerate(favorites, 1):
        print(f"[{i}/{len(favorites)}] {movie.title} (id {movie.id})")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--settings-file", default=SETTINGS_FILE)
    parser.add_argument("--key", default=FAVORITES_KEY)
    parser.add_argument("--reset", action="store_true", help="clear a corrupt favorites list")
    args = parser.parse_args(argv)

    configure_logging()
    store = FavoritesStore(JsonFileSettingsStore(args.settings_file), key=args.key)
    return repair_favorites(store, reset=args.reset)


if __name__ == "__main__":
    sys.exit(main())
