from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool = True


class ConvertResponse(BaseModel):
    success: bool = True
    filename: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

    @classmethod
    def create_error(cls, message: str) -> "ErrorResponse":
        return cls(error=message)
