# app/models/api_responses.py
from datetime import datetime
from pydantic import BaseModel, Field

from app.domain.fortune_models import FortuneReading


class FortuneResultDTO(BaseModel):
    overall: str
    career: str
    love: str
    wealth: str
    health: str


class UploadResponse(BaseModel):
    """Body returned for a successful upload."""
    message: str = "文件上传成功"
    filename: str
    result: FortuneResultDTO

    @classmethod
    def from_reading(cls, reading: FortuneReading) -> "UploadResponse":
        return cls(
            filename=reading.filename,
            result=FortuneResultDTO(**reading.result.as_dict()),
        )


class ApiStatusResponse(BaseModel):
    message: str = Field(..., examples=["AI Fortune Teller API is running"])


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["healthy"])
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
