"""Alerter service - pushes a notification when a reading crosses the threshold."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from ..models import Sensor
from .push_sender import PushSenderService

logger = logging.getLogger(__name__)


class AlerterService:
    """Sends threshold alerts to the owner of a sensor.
    
    Runs after the ingestion response has been sent and opens its own
    session. Nothing here may raise into the caller.
    """
    
    def __init__(
        self,
        session_factory: async_sessionmaker,
        push_sender: PushSenderService,
        threshold: float,
    ):
        self.session_factory = session_factory
        self.push_sender = push_sender
        self.threshold = threshold
    
    def should_alert(self, value: float) -> bool:
        return value > self.threshold
    
    async def _get_sensor(self, session: AsyncSession, sensor_id: str):
        result = await session.execute(
            select(Sensor)
            .options(selectinload(Sensor.usuario))
            .where(Sensor.sensor_id == sensor_id)
        )
        return result.scalar_one_or_none()
    
    async def send_reading_alert(self, reading_id: int, sensor_id: str, value: float) -> bool:
        """Notify the sensor owner about a high reading.
        
        The reading id travels in the payload so the app can drop duplicate
        deliveries.
        
        Returns:
            True if the notification was delivered
        """
        try:
            async with self.session_factory() as session:
                sensor = await self._get_sensor(session, sensor_id)
            
            if sensor is None:
                logger.info(f"Alert skipped: sensor {sensor_id} is not registered")
                return False
            
            expo_token = sensor.usuario.expo_token if sensor.usuario else None
            if not expo_token:
                logger.info(f"Alert skipped: owner of sensor {sensor_id} has no push token")
                return False
            
            delivered = await self.push_sender.send_notification(
                expo_token=expo_token,
                title="Alerta de sensor",
                body=f"{sensor.sensor_username} reportó un valor de {value:g}",
                data={"id": reading_id, "sensorID": sensor_id},
            )
            logger.info(f"Alert for reading {reading_id} on {sensor_id}: delivered={delivered}")
            return delivered
        except Exception as e:
            logger.error(f"Failed to send alert for reading {reading_id}: {e}")
            return False
