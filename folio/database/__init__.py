from .base import Base
from .database import build_engine, build_session_factory, get_db, create_tables
from .models import (
    User, Profile, Template, UserSettings, Project, Comment,
    Skill, Experience, Testimonial, BlogPost, VisitorMessage, Analytics,
)

__all__ = [
    "Base", "build_engine", "build_session_factory", "get_db", "create_tables",
    "User", "Profile", "Template", "UserSettings", "Project", "Comment",
    "Skill", "Experience", "Testimonial", "BlogPost", "VisitorMessage", "Analytics",
]
