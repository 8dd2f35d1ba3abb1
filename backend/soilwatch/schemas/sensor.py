"""Sensor schemas for API."""
from typing import List, Optional
from pydantic import BaseModel

from .common import SensorId, TokenResponse
from .reporte import ReporteResponse


class SensorCreate(BaseModel):
    """Schema for registering a sensor."""
    sensorID: SensorId = None
    sensorUsername: Optional[str] = None
    sensorDescripction: Optional[str] = None


class SensorResponse(BaseModel):
    """Full sensor record."""
    id: int
    sensorID: str
    sensorUsername: str
    sensorDescripction: str
    usuarioId: int


class SensorCreateResponse(TokenResponse):
    sensor: SensorResponse


class SensorSummary(BaseModel):
    """Projection used when listing the caller's sensors."""
    sensorID: str
    sensorUsername: str


class SensorListResponse(TokenResponse):
    sensores: List[SensorSummary]


class SensorDetail(BaseModel):
    """Sensor metadata with its readings, newest first."""
    id: int
    sensorUsername: str
    sensorDescripction: str
    sensorID: str
    reportes: List[ReporteResponse]


class SensorDetailResponse(TokenResponse):
    resultado: SensorDetail


class SensorTokenRequest(BaseModel):
    sensorID: SensorId = None


class SensorTokenResponse(BaseModel):
    """Push destination of the user owning a sensor."""
    username: str
    sensorName: str
    expoToken: Optional[str] = None
