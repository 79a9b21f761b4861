from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core.uid import UidGenerator, get_uid_generator
from ...schemas.response import UidResponse

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

router = APIRouter()


@router.get("/uid")
def uid(generator: UidGenerator = Depends(get_uid_generator)) -> JSONResponse:
    body = UidResponse(id=generator.generate())
    return JSONResponse(
        content=body.model_dump(),
        media_type=JSON_MEDIA_TYPE,
        headers={"Access-Control-Allow-Origin": "*"},
    )
