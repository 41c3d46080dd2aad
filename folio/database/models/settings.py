from sqlalchemy import Column, ForeignKey, String, Text

from ..base import Base
from ..types import StringMap


class Template(Base):
    __tablename__ = "project_templates"

    template_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    layout = Column(Text, nullable=False)


class UserSettings(Base):
    __tablename__ = "user_settings"

    user_id = Column(String(36), ForeignKey("users.user_id"), primary_key=True)
    color_scheme = Column(StringMap, nullable=True)
    chosen_template = Column(String(36), ForeignKey("project_templates.template_id"), nullable=True)
    font_selection = Column(String(255), nullable=True)
