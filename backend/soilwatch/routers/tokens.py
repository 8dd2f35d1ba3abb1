"""Sensor owner lookup used by devices to address push notifications."""
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..dependencies import get_db, require_device_key
from ..errors import NotFound, ValidationFailed
from ..models import Sensor
from ..schemas import SensorTokenRequest, SensorTokenResponse

router = APIRouter(prefix="/token", tags=["token"])


@router.post("", response_model=SensorTokenResponse, dependencies=[Depends(require_device_key)])
async def get_sensor_owner_token(
    data: SensorTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """Return the owner's username and push token for a registered sensor."""
    if not data.sensorID:
        raise ValidationFailed("Falta sensorID")
    
    result = await db.execute(
        select(Sensor)
        .options(selectinload(Sensor.usuario))
        .where(Sensor.sensor_id == data.sensorID)
    )
    sensor = result.scalar_one_or_none()
    
    if not sensor:
        raise NotFound("Sensor no registrado")
    
    return SensorTokenResponse(
        username=sensor.usuario.username,
        sensorName=sensor.sensor_username,
        expoToken=sensor.usuario.expo_token,
    )
