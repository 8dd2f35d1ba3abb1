"""Sensor model - devices bound to an owning user."""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base


class Sensor(Base):
    """A registered sensor device.
    
    `sensor_id` is the device-facing identifier readings are addressed by;
    `id` is the internal row id.
    """
    
    __tablename__ = "sensores"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    sensor_id = Column("sensorID", String, unique=True, nullable=False)
    sensor_username = Column("sensorUsername", String, nullable=False)
    sensor_description = Column("sensorDescripction", String, nullable=False)
    usuario_id = Column("usuarioId", Integer, ForeignKey("usuarios.id"), nullable=False, index=True)
    
    usuario = relationship("Usuario", back_populates="sensores")
