from fastapi import Request
from fastapi.responses import JSONResponse


class ValidationError(Exception):
    """A required request field is missing. Rendered as a 400."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"msg": "error", "error": exc.message})
