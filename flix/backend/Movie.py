from datetime import date

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticSerializationError

from flix.backend.config import IMAGE_BASE_URL


class MovieCodecError(ValueError):
    """Base class for movie serialization failures."""


class DecodeError(MovieCodecError):
    """Bytes do not describe a movie (or list of movies) under the wire schema."""


class EncodeError(MovieCodecError):
    """A movie value cannot be represented in the wire schema."""


# wire name -> app-facing name
APP_FIELD_NAMES = {
    "title": "title",
    "overview": "overview",
    "poster_path": "posterPath",
    "backdrop_path": "backdropPath",
    "release_date": "releaseDate",
    "vote_average": "voteAverage",
    "id": "id",
}


def build_image_url(path: str | None, size: str = "w500") -> str | None:
    """
    Construct a full image URL from a TMDb-style relative path
    """
    if not path:
        return None
    return f"{IMAGE_BASE_URL}{size}{path}"


class Movie(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    title: str
    overview: str
    poster_path: str | None = None  # used to build the poster image URL
    backdrop_path: str | None = None
    vote_average: float | None = None
    release_date: date | None = None
    id: int

    @field_validator("release_date", mode="before")
    @classmethod
    def blank_release_date(cls, value):
        # the feed sends "" for titles without a release date
        if value == "":
            return None
        if isinstance(value, str):
            return date.fromisoformat(value)
        return value

    @property
    def poster_url(self) -> str | None:
        return build_image_url(self.poster_path)

    @property
    def backdrop_url(self) -> str | None:
        return build_image_url(self.backdrop_path, size="w780")

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "overview": self.overview,
            "posterPath": self.poster_path,
            "backdropPath": self.backdrop_path,
            "voteAverage": self.vote_average,
            "releaseDate": self.release_date.isoformat() if self.release_date else None,
            "posterUrl": self.poster_url,
            "backdropUrl": self.backdrop_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Movie":
        """Inverse of to_dict: map app-facing names back to wire names."""
        values = {
            wire_name: data[app_name]
            for wire_name, app_name in APP_FIELD_NAMES.items()
            if app_name in data
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise DecodeError(f"Invalid movie data: {e}") from e


class MovieFeed(BaseModel):
    """List response envelope of the upstream movie feed."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    results: list[Movie]


_movie_list = TypeAdapter(list[Movie])


def equals(a: Movie, b: Movie) -> bool:
    """
    Compare two movies field by field.
    Optional fields match when both are absent or both hold equal values.
    """
    for name in Movie.model_fields:
        left = getattr(a, name)
        right = getattr(b, name)
        if (left is None) != (right is None):
            return False
        if left != right:
            return False
    return True


def encode(movie: Movie) -> bytes:
    """Serialize one movie to JSON bytes using the wire field names."""
    if not isinstance(movie, Movie):
        raise EncodeError(f"Expected Movie, got {type(movie).__name__}")
    try:
        return movie.model_dump_json().encode("utf-8")
    except PydanticSerializationError as e:
        raise EncodeError(f"Cannot encode movie {movie.id}: {e}") from e


def decode(data: bytes) -> Movie:
    """Parse JSON bytes into a Movie, raising DecodeError on schema mismatch."""
    try:
        return Movie.model_validate_json(data, strict=True)
    except ValidationError as e:
        raise DecodeError(f"Invalid movie data: {e}") from e


def encode_many(movies: list[Movie]) -> bytes:
    """Serialize a list of movies to a JSON array."""
    for movie in movies:
        if not isinstance(movie, Movie):
            raise EncodeError(f"Expected Movie, got {type(movie).__name__}")
    try:
        return _movie_list.dump_json(list(movies))
    except PydanticSerializationError as e:
        raise EncodeError(f"Cannot encode movies: {e}") from e


def decode_many(data: bytes) -> list[Movie]:
    """Parse a JSON array of movies."""
    try:
        return _movie_list.validate_json(data, strict=True)
    except ValidationError as e:
        raise DecodeError(f"Invalid movie list: {e}") from e


def decode_feed(data: bytes) -> MovieFeed:
    """Parse a feed response body ({"results": [...]})."""
    try:
        return MovieFeed.model_validate_json(data, strict=True)
    except ValidationError as e:
        raise DecodeError(f"Invalid movie feed: {e}") from e
