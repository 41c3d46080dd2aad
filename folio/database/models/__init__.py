from .user import User, Profile
from .settings import Template, UserSettings
from .project import Project, Comment
from .entries import Skill, Experience, Testimonial, BlogPost
from .engagement import VisitorMessage, Analytics

__all__ = [
    "User", "Profile", "Template", "UserSettings", "Project", "Comment",
    "Skill", "Experience", "Testimonial", "BlogPost", "VisitorMessage", "Analytics",
]
