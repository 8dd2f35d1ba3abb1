"""Pydantic schemas for API request/response models."""
from .common import MessageResponse, TokenResponse
from .usuario import (
    UserRegister,
    UserLogin,
    UserProfile,
    UserProfileResponse,
)
from .sensor import (
    SensorCreate,
    SensorResponse,
    SensorCreateResponse,
    SensorSummary,
    SensorListResponse,
    SensorDetail,
    SensorDetailResponse,
    SensorTokenRequest,
    SensorTokenResponse,
)
from .reporte import (
    ReporteCreate,
    ReporteResponse,
    ReporteWithSensor,
)

__all__ = [
    "MessageResponse",
    "TokenResponse",
    "UserRegister",
    "UserLogin",
    "UserProfile",
    "UserProfileResponse",
    "SensorCreate",
    "SensorResponse",
    "SensorCreateResponse",
    "SensorSummary",
    "SensorListResponse",
    "SensorDetail",
    "SensorDetailResponse",
    "SensorTokenRequest",
    "SensorTokenResponse",
    "ReporteCreate",
    "ReporteResponse",
    "ReporteWithSensor",
]
