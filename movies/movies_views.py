from dataclasses import asdict
from typing import Any
from flask import Blueprint, jsonify, make_response
from flask_apispec import doc, marshal_with, use_kwargs
import movies.movies_service as movies_service
from schema.movie_schema import (
    MessageResponseSchema,
    MovieFilterQuerySchema,
    MovieResponseSchema,
    MovieSchema,
    PartialMovieSchema,
    ValidationErrorResponseSchema,
)

bp_name = "movies"
bp_url_prefix = "/movies"
bp = Blueprint(bp_name, __name__, url_prefix=bp_url_prefix)

movie_not_found = {"message": "Movie not found"}


@bp.route("", methods=["GET"], endpoint="listMovies")
@doc(description="List all movies, optionally filtered by genre.", tags=["movies"])
@use_kwargs(MovieFilterQuerySchema, location="query", apply=False)
@marshal_with(MovieResponseSchema(many=True), code=200, apply=False)
def show_all_movies() -> Any:
    params = movies_service.get_filter_params()
    result = movies_service.get_movies(params)
    return make_response(jsonify(result), 200)


@bp.route("/<string:id>", methods=["GET"], endpoint="getMovie")
@doc(description="Fetch a single movie by id.", tags=["movies"])
@marshal_with(MovieResponseSchema, code=200, apply=False)
@marshal_with(MessageResponseSchema, code=404, apply=False)
def show_one_movie(id):
    movie = movies_service.get_movie(id)

    if movie is None:
        return make_response(jsonify(movie_not_found), 404)

    return make_response(jsonify(asdict(movie)), 200)


@bp.route("", methods=["POST"], endpoint="createMovie")
@doc(
    description="Create a movie. The id is generated by the server.",
    tags=["movies"],
)
@use_kwargs(MovieSchema, location="json", apply=False)
@marshal_with(MovieResponseSchema, code=201, apply=False)
@marshal_with(ValidationErrorResponseSchema, code=400, apply=False)
def create_movie():
    body = movies_service.get_request_body()
    result, movie = movies_service.create_movie(body)

    if not result.ok:
        return make_response(
            jsonify({"error": movies_service.serialize_errors(result)}), 400
        )

    return make_response(jsonify(asdict(movie)), 201)


@bp.route("/<string:id>", methods=["PATCH"], endpoint="updateMovie")
@doc(description="Update the given fields of a movie.", tags=["movies"])
@use_kwargs(PartialMovieSchema(partial=True), location="json", apply=False)
@marshal_with(MovieResponseSchema, code=200, apply=False)
@marshal_with(ValidationErrorResponseSchema, code=400, apply=False)
@marshal_with(MessageResponseSchema, code=404, apply=False)
def update_movie(id):
    body = movies_service.get_request_body()
    result, movie = movies_service.update_movie(id, body)

    if not result.ok:
        return make_response(
            jsonify({"error": movies_service.serialize_errors(result)}), 400
        )

    if movie is None:
        return make_response(jsonify(movie_not_found), 404)

    return make_response(jsonify(asdict(movie)), 200)


@bp.route("/<string:id>", methods=["DELETE"], endpoint="deleteMovie")
@doc(description="Delete a movie.", tags=["movies"])
@marshal_with(MessageResponseSchema, code=200, apply=False)
@marshal_with(MessageResponseSchema, code=404, apply=False)
def delete_movie(id):
    if not movies_service.delete_movie(id):
        return make_response(jsonify(movie_not_found), 404)

    return make_response(jsonify({"message": "Movie Deleted"}), 200)


view_functions = {
    "listMovies": show_all_movies,
    "getMovie": show_one_movie,
    "createMovie": create_movie,
    "updateMovie": update_movie,
    "deleteMovie": delete_movie,
}
