from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from ..base import Base, new_id, utcnow
from ..types import FreeformMap


class VisitorMessage(Base):
    __tablename__ = "visitor_messages"

    message_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), index=True, nullable=False)
    visitor_email = Column(String(255), nullable=True)
    visitor_message = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Analytics(Base):
    __tablename__ = "analytics"

    analytics_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), unique=True, nullable=False)
    visit_count = Column(Integer, nullable=False, default=0)
    popular_projects = Column(FreeformMap, nullable=True)
    interaction_data = Column(FreeformMap, nullable=True)
