from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from ..base import Base, new_id, utcnow
from ..types import ImageList


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    images = Column(ImageList, nullable=True)
    project_url = Column(Text, nullable=True)


class Comment(Base):
    __tablename__ = "comments"

    comment_id = Column(String(36), primary_key=True, default=new_id)
    project_id = Column(String(36), ForeignKey("projects.project_id"), index=True, nullable=False)
    user_name = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
