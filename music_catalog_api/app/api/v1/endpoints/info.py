"""Root greeting used as a liveness probe."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello world"
