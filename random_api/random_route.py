import re
from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from pydantic import BeforeValidator

from .deps import get_random_source
from .generators import (
    DEFAULT_LENGTH,
    INT32_MAX,
    INT32_MIN,
    random_custom,
    random_decimal,
    random_number,
    random_string,
)
from .models import CustomRandomJSONResponse, CustomRandomRequest, CustomRandomResponse
from .source import RandomSource

router = APIRouter(prefix="/random", tags=["random"])

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


def _integer_text(value):
    # "5.0" or "1e3" are not integers on the query string
    if isinstance(value, str) and not _INTEGER_TEXT.fullmatch(value.strip()):
        raise ValueError("must be an integer")
    return value


QueryInt = Annotated[int, BeforeValidator(_integer_text)]


@router.get("/number")
def get_number(
    min: Optional[QueryInt] = Query(None, ge=INT32_MIN, le=INT32_MAX),
    max: Optional[QueryInt] = Query(None, ge=INT32_MIN, le=INT32_MAX),
    source: RandomSource = Depends(get_random_source),
) -> int:
    # GET /random/number            -> [0, 2147483647)
    # GET /random/number?min=10&max=50 -> [10, 50]
    return random_number(source, min, max)


@router.get("/decimal")
def get_decimal(source: RandomSource = Depends(get_random_source)) -> float:
    value: Decimal = random_decimal(source)
    return float(value)


@router.get("/string", response_class=PlainTextResponse)
def get_string(
    length: QueryInt = Query(DEFAULT_LENGTH),
    source: RandomSource = Depends(get_random_source),
):
    return PlainTextResponse(random_string(source, length))


@router.post(
    "/custom",
    response_model=CustomRandomResponse,
    response_class=CustomRandomJSONResponse,
)
def post_custom(
    req: CustomRandomRequest,
    source: RandomSource = Depends(get_random_source),
):
    result = random_custom(
        source,
        req.type,
        min=req.min,
        max=req.max,
        decimals=req.decimals,
        length=req.length,
    )
    resp = CustomRandomResponse(result=result)
    return CustomRandomJSONResponse({"result": resp.result})
