"""
Favorites Storage Service Layer
Handles reading and writing the favorite movies list in the settings store
"""

import logging
import threading
from contextlib import AbstractContextManager

import flix.backend.Movie as movie_codec
from flix.backend.Movie import DecodeError, Movie
from flix.backend.config import FAVORITES_KEY
from flix.backend.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class FavoritesStore:
    """
    The favorites list kept as one JSON blob under a single settings key.

    Every mutation loads the whole list, changes it in memory and writes the
    whole list back. Mutations on the same instance are serialized by a lock;
    separate processes sharing the backing store can still overwrite each other.
    """

    def __init__(
        self,
        settings: SettingsStore,
        key: str = FAVORITES_KEY,
        lock: AbstractContextManager | None = None,
    ):
        self.settings = settings
        self.key = key
        self._lock = lock if lock is not None else threading.RLock()

    def load_all(self) -> list[Movie]:
        """
        Read every favorite movie from the settings store
        Returns:
            List of Movie in the order they were added, empty if nothing is saved yet
        Raises:
            DecodeError: a value exists under the key but is not a valid movie list
        """
        data = self.settings.get(self.key)
        if data is None:
            return []
        try:
            movies = movie_codec.decode_many(data)
        except DecodeError:
            logger.warning("Stored favorites under %r are corrupt (%d bytes)", self.key, len(data))
            raise
        logger.debug("Loaded %d favorites from %r", len(movies), self.key)
        return movies

    def save_all(self, movies: list[Movie]) -> None:
        """
        Replace the stored favorites with the given list
        Args:
            movies: Full list of favorites to persist
        """
        self.settings.set(self.key, movie_codec.encode_many(movies))
        logger.debug("Saved %d favorites to %r", len(movies), self.key)

    def add(self, movie: Movie) -> None:
        """Append a movie to the end of the favorites, duplicates included."""
        with self._lock:
            movies = self.load_all()
            movies.append(movie)
            self.save_all(movies)

    def remove(self, movie: Movie) -> None:
        """Remove every favorite equal to the given movie (saves even if none match)."""
        with self._lock:
            movies = self.load_all()
            remaining = [m for m in movies if not movie_codec.equals(m, movie)]
            self.save_all(remaining)

    def contains(self, movie: Movie) -> bool:
        return any(movie_codec.equals(m, movie) for m in self.load_all())

    def clear(self) -> None:
        with self._lock:
            self.save_all([])
