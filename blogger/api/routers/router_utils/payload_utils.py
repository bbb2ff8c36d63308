"""
Request payload parsing.

The bundled HTML forms submit URL-encoded bodies with bracketed keys
(``user[email]``) while API clients send JSON. Both are normalised into a
nested dict and validated against a pydantic model.

Dependencies: fastapi, pydantic
System role: Body parsing for form and JSON clients
"""

import json
import re
from typing import Any, Callable, Iterable, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_KEY_RE = re.compile(r"([^\[\]]+)((?:\[[^\[\]]+\])*)")
_SEGMENT_RE = re.compile(r"\[([^\[\]]+)\]")


def _split_key(key: str) -> list[str]:
    match = _KEY_RE.fullmatch(key)
    if match is None:
        return [key]
    return [match.group(1), *_SEGMENT_RE.findall(match.group(2))]


def expand_form_keys(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """
    Expand bracketed form keys into nested dicts.

    >>> expand_form_keys([("user[email]", "a@b.c"), ("text", "hi")])
    {'user': {'email': 'a@b.c'}, 'text': 'hi'}

    Later keys win on conflicts.
    """
    data: dict[str, Any] = {}
    for key, value in items:
        parts = _split_key(key)
        target = data
        for part in parts[:-1]:
            node = target.get(part)
            if not isinstance(node, dict):
                node = {}
                target[part] = node
            target = node
        target[parts[-1]] = value
    return data


def _invalid_body(message: str) -> RequestValidationError:
    return RequestValidationError(
        [{"loc": ("body",), "msg": message, "type": "value_error"}]
    )


async def parse_payload(request: Request) -> dict[str, Any]:
    """
    Read the request body as a dict regardless of encoding.

    Raises:
        RequestValidationError: If the body is not a JSON object or a form
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return expand_form_keys(form.multi_items())

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        raise _invalid_body("Body must be JSON or form encoded")
    if not isinstance(data, dict):
        raise _invalid_body("Body must be a JSON object")
    return data


def payload_of(model: type[M]) -> Callable[[Request], Any]:
    """
    Build a dependency that parses the body into ``model``.

    Usage:
        async def create_post(body: CreatePostRequest = Depends(payload_of(CreatePostRequest))):
            ...
    """

    async def dependency(request: Request) -> M:
        data = await parse_payload(request)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors())

    dependency.__name__ = f"parse_{model.__name__}"
    return dependency
