"""Sensor registry endpoints, always scoped to the authenticated owner."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_current_user, get_db
from ..errors import Conflict, NotFound, ValidationFailed
from ..models import Reporte, Sensor, Usuario
from ..schemas import (
    ReporteResponse,
    SensorCreate,
    SensorCreateResponse,
    SensorDetail,
    SensorDetailResponse,
    SensorListResponse,
    SensorResponse,
    SensorSummary,
)
from ..utils.db_utils import commit_unique

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sensor", tags=["sensor"])

# Largest id an Integer primary key can hold on PostgreSQL
MAX_ROW_ID = 2**31 - 1


@router.post("", response_model=SensorCreateResponse)
async def register_sensor(
    data: SensorCreate,
    claims: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Register a sensor for the caller. Sensor ids are unique across all users."""
    if not data.sensorID or not data.sensorUsername or not data.sensorDescripction:
        raise ValidationFailed("Faltan datos del sensor")
    
    # A token can outlive its account
    if await db.get(Usuario, claims["id"]) is None:
        raise NotFound("No se pudo obtener el usuario")
    
    existing = await db.execute(select(Sensor.id).where(Sensor.sensor_id == data.sensorID))
    if existing.scalar_one_or_none() is not None:
        logger.warning(f"Sensor registration rejected, {data.sensorID} already registered")
        raise Conflict("El sensor ya está registrado")
    
    sensor = Sensor(
        sensor_id=data.sensorID,
        sensor_username=data.sensorUsername,
        sensor_description=data.sensorDescripction,
        usuario_id=claims["id"],
    )
    db.add(sensor)
    
    await commit_unique(db, "El sensor ya está registrado")
    
    logger.info(f"Sensor registered: {sensor.sensor_id} for user {sensor.usuario_id}")
    return SensorCreateResponse(
        message="Sensor registrado exitosamente",
        token=None,
        sensor=SensorResponse(
            id=sensor.id,
            sensorID=sensor.sensor_id,
            sensorUsername=sensor.sensor_username,
            sensorDescripction=sensor.sensor_description,
            usuarioId=sensor.usuario_id,
        ),
    )


@router.get("", response_model=SensorListResponse)
async def list_sensors(
    claims: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's sensors."""
    result = await db.execute(
        select(Sensor.sensor_id, Sensor.sensor_username)
        .where(Sensor.usuario_id == claims["id"])
        .order_by(Sensor.id)
    )
    
    return SensorListResponse(
        message="Sensores obtenidos exitosamente",
        sensores=[
            SensorSummary(sensorID=sensor_id, sensorUsername=sensor_username)
            for sensor_id, sensor_username in result.all()
        ],
        token=None,
    )


@router.get("/{id}", response_model=SensorDetailResponse)
async def get_sensor(
    id: str,
    claims: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get one of the caller's sensors by internal id, with its readings newest first."""
    try:
        sensor_pk = int(id)
    except ValueError:
        raise ValidationFailed("Debe proporcionar un id")
    
    if not 0 < sensor_pk <= MAX_ROW_ID:
        raise NotFound("El sensor no se pudo obtener")
    
    # Matching on the owner as well means other users' sensors look absent
    result = await db.execute(
        select(Sensor).where(
            Sensor.id == sensor_pk,
            Sensor.usuario_id == claims["id"],
        )
    )
    sensor = result.scalar_one_or_none()
    
    if not sensor:
        raise NotFound("El sensor no se pudo obtener")
    
    readings = await db.execute(
        select(Reporte)
        .where(Reporte.sensor_id == sensor.sensor_id)
        .order_by(Reporte.fecha.desc(), Reporte.id.desc())
    )
    
    return SensorDetailResponse(
        message="Sensor obtenido exitosamente",
        resultado=SensorDetail(
            id=sensor.id,
            sensorUsername=sensor.sensor_username,
            sensorDescripction=sensor.sensor_description,
            sensorID=sensor.sensor_id,
            reportes=[
                ReporteResponse(id=r.id, sensorID=r.sensor_id, valor=r.valor, fecha=r.fecha)
                for r in readings.scalars().all()
            ],
        ),
        token=None,
    )
