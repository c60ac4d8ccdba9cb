"""
Request body dependencies.

Bodies are accepted as JSON or as URL-encoded / multipart forms, the way
browser forms and scripted clients both post to this API.
"""

from typing import Any, Awaitable, Callable, Dict, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
JSON_CONTENT_TYPE = "application/json"


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Read the request body into a plain dict.

    An empty body, or one in any other encoding, reads as an empty dict.

    Raises:
        RequestValidationError: If the body is not valid JSON or not an object
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form_data = await request.form()
        return dict(form_data)

    if content_type and not content_type.startswith(JSON_CONTENT_TYPE):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = await request.json()
    except ValueError as exc:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}, "ctx": {"error": str(exc)}}]
        )

    if not isinstance(payload, dict):
        raise RequestValidationError(
            [{"type": "model_attributes_type", "loc": ("body",), "msg": "Input should be an object", "input": payload}]
        )
    return payload


def parse_body(schema: Type[SchemaT]) -> Callable[[Request], Awaitable[SchemaT]]:
    """
    Build a dependency that validates the body (JSON or form) into ``schema``.

    Args:
        schema: Pydantic model describing the body

    Returns:
        Async dependency returning a ``schema`` instance
    """

    async def dependency(request: Request) -> SchemaT:
        payload = await read_payload(request)
        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            errors = []
            for error in exc.errors(include_url=False):
                error["loc"] = ("body", *error["loc"])
                errors.append(error)
            raise RequestValidationError(errors)

    return dependency


def body_openapi(schema: Type[BaseModel]) -> Dict[str, Any]:
    """``openapi_extra`` documenting both accepted body encodings of ``schema``."""
    json_schema = schema.model_json_schema()
    return {
        "requestBody": {
            "required": False,
            "content": {
                "application/json": {"schema": json_schema},
                "application/x-www-form-urlencoded": {"schema": json_schema},
            },
        }
    }
