# app/models/user.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.models.base import Base, TimestampMixin

class User(TimestampMixin, Base):
    __tablename__ = "users"
    
    id = Column(String, primary_key=True, index=True)   # Use a UUID string
    github_id = Column(String, nullable=False, index=True)
    username = Column(String, nullable=False)
    email = Column(String, nullable=False)
    name = Column(String, nullable=False)
    
    # Relationships
    apps = relationship("App", back_populates="user", cascade="all, delete-orphan")
    providers = relationship("Provider", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
