"""Usuario model - registered accounts."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from ..database import Base


class Usuario(Base):
    """An account that owns sensors."""
    
    __tablename__ = "usuarios"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    gmail = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    expo_token = Column("expoToken", String, nullable=True)  # Expo push destination
    created_at = Column("createdAt", DateTime, default=datetime.utcnow)
    
    sensores = relationship("Sensor", back_populates="usuario")
