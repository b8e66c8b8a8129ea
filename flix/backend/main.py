from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from flix.backend.config import SETTINGS_FILE, configure_logging
from flix.backend.favorites_storage import FavoritesStore
from flix.backend.Movie import DecodeError, Movie
from flix.backend.settings_store import JsonFileSettingsStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(title="Flix Favorites API", version="1.0.0", lifespan=lifespan)


@lru_cache
def get_favorites_store() -> FavoritesStore:
    """Favorites store backed by the configured settings file"""
    return FavoritesStore(JsonFileSettingsStore(SETTINGS_FILE))


@app.exception_handler(DecodeError)
async def corrupt_favorites_handler(request: Request, exc: DecodeError):
    return JSONResponse(status_code=500, content={"detail": "Stored favorites are corrupt"})


# ========== FAVORITES ROUTES ==========
@app.get("/api/favorites")
def list_favorites(store: FavoritesStore = Depends(get_favorites_store)):
    """Get all favorite movies in the order they were added"""
    movies = store.load_all()
    return {"count": len(movies), "movies": [m.to_dict() for m in movies]}


@app.post("/api/favorites")
def add_favorite(movie: Movie, store: FavoritesStore = Depends(get_favorites_store)):
    """Add a movie to the favorites"""
    store.add(movie)
    return {"status": "success", "message": f"'{movie.title}' added to favorites"}


@app.post("/api/favorites/remove")
def remove_favorite(movie: Movie, store: FavoritesStore = Depends(get_favorites_store)):
    """Remove a movie (every matching copy) from the favorites"""
    store.remove(movie)
    return {"status": "success", "message": f"'{movie.title}' removed from favorites"}


@app.get("/api/favorites/{movie_id}")
def is_favorite(movie_id: int, store: FavoritesStore = Depends(get_favorites_store)):
    """Check whether a movie id is among the favorites"""
    favorite = any(m.id == movie_id for m in store.load_all())
    return {"id": movie_id, "favorite": favorite}


@app.get("/")
def root():
    """API documentation"""
    return {
        "app": "Flix Favorites API",
        "version": "1.0.0",
        "docs": "http://localhost:8000/docs",
        "endpoints": {
            "list_favorites": "GET /api/favorites",
            "add_favorite": "POST /api/favorites",
            "remove_favorite": "POST /api/favorites/remove",
            "is_favorite": "GET /api/favorites/{movie_id}",
        },
    }
