from pydantic import BaseModel, ConfigDict, Field

from media_relay.core.constants import AVAILABLE_ENDPOINTS


class UploadResponse(BaseModel):
    success: bool = True
    message: str = "File uploaded successfully"
    key: str


class DeleteResponse(BaseModel):
    success: bool = True
    message: str = "File deleted successfully"
    key: str


class HealthResponse(BaseModel):
    success: bool = True
    status: str = "healthy"
    timestamp: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class RouteNotFoundResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str = "Not found"
    available_endpoints: list[str] = Field(
        default_factory=lambda: list(AVAILABLE_ENDPOINTS),
        serialization_alias="availableEndpoints",
    )
