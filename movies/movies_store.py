import threading
import uuid
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from movies.model.movie import Movie


class MovieStore:
    """
    In-memory, ordered collection of movies.

    Every operation runs under one lock, so writes are serialized and readers
    never see a half-applied change. Stored movies are frozen, so records
    handed out cannot change the collection. Callers are expected to pass
    data that has already been through ``movies.movies_validation``.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._lock = threading.RLock()
        self._movies: List[Movie] = list(movies or [])

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def list_all(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    def list_by_genre(self, genre: str) -> List[Movie]:
        wanted = genre.casefold()
        with self._lock:
            return [
                movie
                for movie in self._movies
                if any(g.casefold() == wanted for g in movie.genre)
            ]

    def get_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            index = self._index_of(movie_id)
            return self._movies[index] if index is not None else None

    def insert(self, data: Dict[str, Any]) -> Movie:
        with self._lock:
            movie = Movie(id=self._new_id(), **data)
            self._movies.append(movie)
            return movie

    def update(self, movie_id: str, data: Dict[str, Any]) -> Optional[Movie]:
        changes = {key: value for key, value in data.items() if key != "id"}
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return None

            updated = replace(self._movies[index], **changes)
            self._movies[index] = updated
            return updated

    def remove(self, movie_id: str) -> bool:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return False

            del self._movies[index]
            return True

    def _index_of(self, movie_id: str) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None

    def _new_id(self) -> str:
        while True:
            movie_id = str(uuid.uuid4())
            if self._index_of(movie_id) is None:
                return movie_id
