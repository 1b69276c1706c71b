from fastapi import Header, HTTPException, Request, status

from ..services.reading.service import ReadingService


def get_reading_service(request: Request) -> ReadingService:
    """Dependency to get the ReadingService instance."""
    service = getattr(request.app.state, "reading_service", None)
    if service is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Reading service is not available.")
    return service


def get_user_id(x_user_id: str = Header(..., alias="X-User-Id")) -> str:
    """Dependency resolving the caller from the ``X-User-Id`` header."""
    user_id = x_user_id.strip()
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user id.")
    return user_id
