# app/models/provider.py
from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import Base, TimestampMixin

class Provider(TimestampMixin, Base):
    __tablename__ = "providers"
    
    id = Column(String, primary_key=True, index=True)  # UUID as string
    name = Column(String, nullable=False)  # Provider id, e.g. "openai"
    config = Column(Text, nullable=False)  # JSON text, holds credentials
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    
    # Relationship
    user = relationship("User", back_populates="providers")

    def __repr__(self):
        return f"<Provider(id={self.id}, name={self.name}, user_id={self.user_id})>"
