"""Response envelopes and field types shared by all endpoints."""
from typing import Annotated, Optional
from pydantic import BaseModel, BeforeValidator


def coerce_sensor_id(value):
    """Devices may send numeric sensor ids; they are stored as strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


SensorId = Annotated[Optional[str], BeforeValidator(coerce_sensor_id)]


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str


class TokenResponse(BaseModel):
    """Envelope carrying an optional bearer token."""
    message: str
    token: Optional[str] = None
