# app/models/app.py
from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import Base, TimestampMixin

class App(TimestampMixin, Base):
    __tablename__ = "apps"
    
    id = Column(String, primary_key=True, index=True)  # UUID as string
    u_id = Column(String, nullable=False)
    s_id = Column(String, nullable=False, index=True)  # Short prefix of u_id
    name = Column(String, nullable=False)
    description = Column(Text)
    visibility = Column(String, nullable=False)  # "public" or "private"
    saved_specification = Column(Text)
    dust_api_project_id = Column(String, nullable=False)
    user_id = Column(String, ForeignKey("users.id"), nullable=False)
    
    # Relationship
    user = relationship("User", back_populates="apps")

    def __repr__(self):
        return f"<App(id={self.id}, s_id={self.s_id}, name={self.name})>"
