from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from ..base import Base, new_id, utcnow
from ..types import StringMap


class User(Base):
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")


class Profile(Base):
    __tablename__ = "user_profiles"

    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)
    profile_picture_url = Column(Text, nullable=True)
    cover_image_url = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    contact_email = Column(String(255), nullable=True)
    phone_number = Column(String(50), nullable=True)
    social_media_links = Column(StringMap, nullable=True)

    user = relationship("User", back_populates="profile")
