from fastapi import HTTPException


class Unauthenticated(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(HTTPException):
    def __init__(self, detail: str = "Access Denied"):
        super().__init__(status_code=403, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str = "User already exists"):
        super().__init__(status_code=400, detail=detail)


class InvalidCredentials(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class InternalError(HTTPException):
    """Unexpected failure; the underlying message is passed through as-is."""

    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)
