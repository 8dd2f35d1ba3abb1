"""Reporte model - one numeric reading posted by a sensor."""
from datetime import datetime
from sqlalchemy import Column, Integer, Float, String, DateTime

from ..database import Base


class Reporte(Base):
    """A timestamped measurement.
    
    Readings reference the sensor by its external identifier and carry no
    foreign key, so readings for unregistered devices are still stored.
    """
    
    __tablename__ = "reportes"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    valor = Column(Float, nullable=False)
    sensor_id = Column("sensorID", String, nullable=False, index=True)
    fecha = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
