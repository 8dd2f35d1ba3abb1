"""Reading schemas for API."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from .common import SensorId


class ReporteCreate(BaseModel):
    """Schema for a reading posted by a device."""
    sensorID: SensorId = None
    value: Optional[float] = Field(None, allow_inf_nan=False)


class ReporteResponse(BaseModel):
    id: int
    sensorID: str
    valor: float
    fecha: datetime


class ReporteWithSensor(BaseModel):
    """Reading joined with its sensor metadata.
    
    Sensor fields are null when the sensor disappeared between lookups.
    """
    fecha: datetime
    valor: float
    sensorID: str
    sensorUsername: Optional[str] = None
    sensorDescripction: Optional[str] = None
