import json
from dataclasses import asdict
from http import HTTPStatus
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from flask import current_app, request
from werkzeug.exceptions import BadRequest
from common.utils.logging_service import logger
from common.utils.utils import json_abort
from movies.model.movie import Movie
from movies.model.movies_filter_params import MoviesFilterParams
from movies.model.validation_result import ValidationResult
from movies.movies_store import MovieStore
from movies.movies_validation import validate_movie, validate_partial_movie

STORE_EXTENSION_KEY = "movie_store"
DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "movies.json"


def get_store() -> MovieStore:
    return current_app.extensions[STORE_EXTENSION_KEY]


def get_filter_params() -> MoviesFilterParams:
    genre = request.args.get("genre")
    return MoviesFilterParams(genre=genre if genre else None)


def get_request_body() -> Any:
    """Parse the request body as JSON. An empty body counts as ``{}``."""
    if not request.get_data():
        return {}

    if not request.is_json:
        logger.warning("Rejected %s body on %s", request.mimetype, request.path)
        json_abort(
            HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            {"message": "Content-Type must be application/json"},
        )

    try:
        return request.get_json()
    except (BadRequest, RecursionError):
        logger.warning("Rejected malformed JSON body on %s", request.path)
        json_abort(HTTPStatus.BAD_REQUEST, {"message": "Malformed JSON body"})


def get_movies(params: MoviesFilterParams) -> List[Dict[str, Any]]:
    store = get_store()

    if params.genre:
        movies = store.list_by_genre(params.genre)
    else:
        movies = store.list_all()

    return [asdict(movie) for movie in movies]


def get_movie(movie_id: str) -> Optional[Movie]:
    return get_store().get_by_id(movie_id)


def create_movie(body: Any) -> Tuple[ValidationResult, Optional[Movie]]:
    result = validate_movie(body)
    if not result.ok:
        logger.info("Movie creation rejected with %d error(s)", len(result.errors))
        return result, None

    movie = get_store().insert(result.data)
    logger.info("Created movie %s (%s)", movie.id, movie.title)
    return result, movie


def update_movie(
    movie_id: str, body: Any
) -> Tuple[ValidationResult, Optional[Movie]]:
    result = validate_partial_movie(body)
    if not result.ok:
        logger.info(
            "Update of movie %s rejected with %d error(s)",
            movie_id,
            len(result.errors),
        )
        return result, None

    movie = get_store().update(movie_id, result.data)
    if movie is not None:
        logger.info("Updated movie %s fields %s", movie_id, sorted(result.data))
    return result, movie


def delete_movie(movie_id: str) -> bool:
    removed = get_store().remove(movie_id)
    if removed:
        logger.info("Deleted movie %s", movie_id)
    return removed


def serialize_errors(result: ValidationResult) -> List[Dict[str, Any]]:
    return [asdict(error) for error in result.errors]


def load_seed_movies(path) -> List[Movie]:
    """
    Read the static seed collection from ``path``.

    Entries keep the ids they were written with. Entries without an id, with a
    duplicate id, or failing validation are logged and skipped.
    """
    with open(path, encoding="utf-8") as f:
        entries = json.load(f)

    movies: List[Movie] = []
    seen_ids = set()
    for entry in entries:
        movie_id = entry.get("id") if isinstance(entry, dict) else None
        if not isinstance(movie_id, str) or movie_id in seen_ids:
            logger.warning("Skipping seed movie with missing or duplicate id")
            continue

        result = validate_movie(entry)
        if not result.ok:
            logger.warning(
                "Skipping invalid seed movie %s: %s",
                movie_id,
                "; ".join(error.message for error in result.errors),
            )
            continue

        seen_ids.add(movie_id)
        movies.append(Movie(id=movie_id, **result.data))

    logger.info("Loaded %d seed movie(s) from %s", len(movies), path)
    return movies
