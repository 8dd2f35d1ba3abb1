"""Database models."""
from .usuario import Usuario
from .sensor import Sensor
from .reporte import Reporte

__all__ = ["Usuario", "Sensor", "Reporte"]
