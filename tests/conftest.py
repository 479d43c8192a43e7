import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app import create_app
from movies.movies_store import MovieStore

TEST_ORIGINS = ["http://localhost:1234", "https://iap-dev.tech"]


@pytest.fixture
def valid_movie():
    return {
        "title": "The Grand Budapest Hotel",
        "year": 2014,
        "director": "Wes Anderson",
        "duration": 99,
        "poster": "https://example.com/posters/grand-budapest.jpg",
        "genre": ["Comedy", "Drama"],
    }


@pytest.fixture
def store():
    return MovieStore()


@pytest.fixture
def app(store):
    return create_app(
        config={"TESTING": True, "FORCE_HTTPS": False, "ORIGINS": TEST_ORIGINS},
        store=store,
    )


@pytest.fixture
def client(app):
    return app.test_client()
