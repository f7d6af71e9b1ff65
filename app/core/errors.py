from fastapi import Request
from fastapi.responses import JSONResponse


class ClientError(Exception):
    """Caller-fixable problem, rendered as ``{"error": message}``."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
