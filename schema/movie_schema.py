from marshmallow import Schema, fields, validate

from movies.model.genre import GENRE_NAMES
from movies.movies_validation import (
    DEFAULT_RATE,
    MAX_RATE,
    MAX_YEAR,
    MIN_RATE,
    MIN_YEAR,
)

# These schemas describe the API for the OpenAPI document only. Payloads are
# checked by movies.movies_validation.


class MovieSchema(Schema):
    title = fields.Str(required=True, validate=validate.Length(min=1))
    year = fields.Int(required=True, validate=validate.Range(min=MIN_YEAR, max=MAX_YEAR))
    director = fields.Str(required=True)
    duration = fields.Int(required=True, validate=validate.Range(min=1))
    poster = fields.Url(required=True)
    genre = fields.List(fields.Str(validate=validate.OneOf(GENRE_NAMES)), required=True)
    rate = fields.Float(
        load_default=DEFAULT_RATE, validate=validate.Range(min=MIN_RATE, max=MAX_RATE)
    )


class PartialMovieSchema(MovieSchema):
    pass


class MovieResponseSchema(MovieSchema):
    id = fields.Str(required=True)


class MovieFilterQuerySchema(Schema):
    genre = fields.Str()


class MessageResponseSchema(Schema):
    message = fields.Str()


class FieldErrorSchema(Schema):
    path = fields.List(fields.Raw())
    message = fields.Str()
    code = fields.Str()


class ValidationErrorResponseSchema(Schema):
    error = fields.List(fields.Nested(FieldErrorSchema))
