"""Reading ingestion and history endpoints."""
import logging
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..context import AppContext
from ..dependencies import get_context, get_current_user, get_db, require_device_key
from ..errors import NotFound, ValidationFailed
from ..models import Reporte, Sensor
from ..schemas import MessageResponse, ReporteCreate, ReporteWithSensor
from ..utils.db_utils import retry_on_lock

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/reports", tags=["reportes"])


@router.post("", response_model=MessageResponse, dependencies=[Depends(require_device_key)])
async def create_report(
    data: ReporteCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    ctx: AppContext = Depends(get_context),
):
    """Store a reading posted by a device.
    
    The sensor id is not checked against registered sensors. Readings above
    the alert threshold schedule a push to the owner after the response.
    """
    if not data.sensorID or data.value is None:
        raise ValidationFailed("Se debe proporcionar el id y el valor")
    
    reporte = Reporte(sensor_id=data.sensorID, valor=data.value)
    db.add(reporte)
    await retry_on_lock(db.commit)
    
    logger.info(f"Reading stored: {reporte.sensor_id}={reporte.valor} (id={reporte.id})")
    
    if ctx.alerter.should_alert(reporte.valor):
        background_tasks.add_task(
            ctx.alerter.send_reading_alert,
            reporte.id,
            reporte.sensor_id,
            reporte.valor,
        )
    
    return MessageResponse(message="Reporte guardado exitosamente")


@router.get("", response_model=List[ReporteWithSensor])
async def list_reports(
    claims: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List readings of all the caller's sensors, newest first."""
    result = await db.execute(select(Sensor).where(Sensor.usuario_id == claims["id"]))
    sensors = {s.sensor_id: s for s in result.scalars().all()}
    
    if not sensors:
        raise NotFound("No tienes sensores registrados")
    
    result = await db.execute(
        select(Reporte)
        .where(Reporte.sensor_id.in_(list(sensors)))
        .order_by(Reporte.fecha.desc(), Reporte.id.desc())
    )
    readings = result.scalars().all()
    
    if not readings:
        raise NotFound("No hay reportes para tus sensores")
    
    response = []
    for reading in readings:
        sensor = sensors.get(reading.sensor_id)
        response.append(ReporteWithSensor(
            fecha=reading.fecha,
            valor=reading.valor,
            sensorID=reading.sensor_id,
            sensorUsername=sensor.sensor_username if sensor else None,
            sensorDescripction=sensor.sensor_description if sensor else None,
        ))
    
    return response
