from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(
    prefix="/test",
    tags=["Health"],
)


@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    return "API working correctly"
