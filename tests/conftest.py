"""Shared fixtures for the favorites test suite."""

from __future__ import annotations

from datetime import date

import pytest

from flix.backend.favorites_storage import FavoritesStore
from flix.backend.Movie import Movie
from flix.backend.settings_store import InMemorySettingsStore


@pytest.fixture
def settings() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def store(settings: InMemorySettingsStore) -> FavoritesStore:
    return FavoritesStore(settings)


@pytest.fixture
def inception() -> Movie:
    return Movie(
        id=27205,
        title="Inception",
        overview="A thief who steals corporate secrets through dream-sharing.",
        poster_path="/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
        backdrop_path="/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
        vote_average=8.4,
        release_date=date(2010, 7, 15),
    )


@pytest.fixture
def arrival() -> Movie:
    return Movie(id=329865, title="Arrival", overview="Linguist meets heptapods.")
