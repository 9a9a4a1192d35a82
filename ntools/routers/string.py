from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from ntools.routers.envelope import respond_string
from ntools.types import StringResult
from ntools.utils import generate_short_unique_string, generate_slug, only_numbers

router = APIRouter(prefix="/String", tags=["string"])


@router.get("/generateSlug/{text:path}", responses={200: {"model": StringResult}})
def slug(text: str) -> Response:
    return respond_string(lambda: generate_slug(text))


@router.get("/onlyNumbers/{text:path}", responses={200: {"model": StringResult}})
def digits(text: str) -> Response:
    return respond_string(lambda: only_numbers(text))


@router.get("/generateShortUniqueString", responses={200: {"model": StringResult}})
def short_unique_string() -> Response:
    return respond_string(generate_short_unique_string)
