"""Root endpoint, used by clients and load balancers as a liveness probe."""

from fastapi import APIRouter, Response, status

router = APIRouter()


@router.get("/", response_class=Response)
async def index() -> Response:
    """Return an empty 200 response."""
    return Response(status_code=status.HTTP_200_OK)
