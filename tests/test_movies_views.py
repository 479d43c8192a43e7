import json

from movies.movies_validation import validate_movie


def seed(store, payload):
    return store.insert(validate_movie(payload).data)


def test_list_movies_empty(client):
    response = client.get("/movies")

    assert response.status_code == 200
    assert response.get_json() == []


def test_list_movies_filtered_by_genre(client, store, valid_movie):
    comedy = seed(store, valid_movie)
    seed(store, {**valid_movie, "title": "Alien", "genre": ["Horror", "Sci-Fi"]})

    response = client.get("/movies?genre=comedy")

    assert response.status_code == 200
    assert [movie["id"] for movie in response.get_json()] == [comedy.id]


def test_list_movies_unknown_genre(client, store, valid_movie):
    seed(store, valid_movie)

    response = client.get("/movies?genre=western")

    assert response.status_code == 200
    assert response.get_json() == []


def test_get_movie_not_found(client):
    response = client.get("/movies/does-not-exist")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Movie not found"}


def test_create_movie(client, store, valid_movie):
    response = client.post("/movies", json=valid_movie)

    body = response.get_json()
    assert response.status_code == 201
    assert body["id"]
    assert body["rate"] == 5
    assert body["title"] == valid_movie["title"]
    assert len(store) == 1


def test_create_movie_validation_error(client, store, valid_movie):
    del valid_movie["title"]

    response = client.post("/movies", json={**valid_movie, "genre": ["Musical"]})

    assert response.status_code == 400
    errors = response.get_json()["error"]
    assert errors[0] == {
        "path": ["title"],
        "message": "Movie title is required",
        "code": "required",
    }
    assert errors[1]["path"] == ["genre", 0]
    assert len(store) == 0


def test_create_movie_malformed_body(client, store):
    response = client.post(
        "/movies", data="{not json", content_type="application/json"
    )

    assert response.status_code == 400
    assert response.get_json() == {"message": "Malformed JSON body"}
    assert len(store) == 0


def test_create_movie_empty_body(client):
    response = client.post("/movies")

    assert response.status_code == 400
    assert len(response.get_json()["error"]) == 6


def test_create_movie_non_object_body(client):
    response = client.post("/movies", data=json.dumps([1, 2]), content_type="application/json")

    assert response.status_code == 400
    assert response.get_json()["error"][0]["path"] == []


def test_update_movie_validation_error_is_400(client, store, valid_movie):
    movie = seed(store, valid_movie)

    response = client.patch(f"/movies/{movie.id}", json={"year": 1800})

    assert response.status_code == 400
    assert response.get_json()["error"][0]["path"] == ["year"]
    assert store.get_by_id(movie.id).year == valid_movie["year"]


def test_update_movie_not_found(client):
    response = client.patch("/movies/missing", json={"rate": 8})

    assert response.status_code == 404
    assert response.get_json() == {"message": "Movie not found"}


def test_update_movie_ignores_id(client, store, valid_movie):
    movie = seed(store, valid_movie)

    response = client.patch(f"/movies/{movie.id}", json={"id": "other", "year": 2020})

    assert response.status_code == 200
    assert response.get_json()["id"] == movie.id
    assert response.get_json()["year"] == 2020


def test_delete_movie_not_found(client):
    response = client.delete("/movies/missing")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Movie not found"}


def test_movie_lifecycle(client, valid_movie):
    created = client.post("/movies", json=valid_movie)
    assert created.status_code == 201
    movie = created.get_json()
    movie_id = movie["id"]

    fetched = client.get(f"/movies/{movie_id}")
    assert fetched.status_code == 200
    assert fetched.get_json() == movie

    patched = client.patch(f"/movies/{movie_id}", json={"rate": 8})
    assert patched.status_code == 200
    assert patched.get_json() == {**movie, "rate": 8}

    listed = client.get("/movies")
    assert listed.get_json() == [{**movie, "rate": 8}]

    deleted = client.delete(f"/movies/{movie_id}")
    assert deleted.status_code == 200
    assert deleted.get_json() == {"message": "Movie Deleted"}

    missing = client.get(f"/movies/{movie_id}")
    assert missing.status_code == 404


def test_health(client, store, valid_movie):
    seed(store, valid_movie)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "up", "movies": 1}


def test_unknown_route_is_json_404(client):
    response = client.get("/series")

    assert response.status_code == 404
    assert response.get_json() == {"message": "Not found"}


def test_wrong_method_is_json_405(client):
    response = client.put("/movies/some-id", json={})

    assert response.status_code == 405
    assert response.get_json() == {"message": "Method not allowed"}


def test_responses_are_not_cached(client):
    response = client.get("/movies")

    assert response.headers["Cache-Control"] == "no-store, max-age=0, must-revalidate"


def test_create_movie_requires_json_content_type(client, store, valid_movie):
    response = client.post(
        "/movies", data=json.dumps(valid_movie), content_type="text/plain"
    )

    assert response.status_code == 415
    assert response.get_json() == {"message": "Content-Type must be application/json"}
    assert len(store) == 0


def test_create_movie_deeply_nested_body(client, store):
    depth = 100000
    response = client.post(
        "/movies", data="[" * depth + "]" * depth, content_type="application/json"
    )

    assert response.status_code == 400
    assert response.get_json() == {"message": "Malformed JSON body"}
    assert len(store) == 0


def test_update_movie_malformed_body(client, store, valid_movie):
    movie = seed(store, valid_movie)

    response = client.patch(
        f"/movies/{movie.id}", data="{\"rate\": ", content_type="application/json"
    )

    assert response.status_code == 400
    assert store.get_by_id(movie.id).rate == 5


def test_swagger_document(client):
    response = client.get("/swagger/")

    assert response.status_code == 200
    document = response.get_json()
    assert "/movies" in document["paths"]
    assert "/movies/{id}" in document["paths"]
    assert {"Movie", "PartialMovie", "MovieResponse"} <= set(
        document["components"]["schemas"]
    )
