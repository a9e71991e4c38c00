from decimal import Decimal
from typing import Optional, Union

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt, StrictStr

from .generators import INT32_MAX, INT32_MIN


class CustomRandomRequest(BaseModel):
    type: Optional[str] = None           # "number" | "decimal" | "string"
    min: Optional[StrictInt] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    max: Optional[StrictInt] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)
    decimals: Optional[StrictInt] = None  # decimal only, default 2
    length: Optional[StrictInt] = None    # string only, default 8


class CustomRandomResponse(BaseModel):
    result: Union[StrictInt, Decimal, StrictStr]


class CustomRandomJSONResponse(JSONResponse):
    """
    JSON body for /random/custom.

    Decimal results are written as bare JSON numbers in fixed-point
    notation, so the rounding scale survives: 0.30 stays ``0.30`` and
    a zero-digit result is ``1``, not ``1.0``.
    """

    def render(self, content) -> bytes:
        result = content.get("result") if isinstance(content, dict) else None
        if isinstance(result, Decimal):
            return ('{"result":%s}' % format(result, "f")).encode("utf-8")
        return super().render(content)
