from .common import MessageResponse
from .auth import RegisterRequest, LoginRequest, PasswordResetRequest, UserOut, AuthResponse
from .profile import ProfileOut, ProfileUpdate, SettingsOut, SettingsUpdate, TemplateOut
from .portfolio import (
    ProjectCreate, ProjectUpdate, ProjectOut,
    SkillCreate, SkillUpdate, SkillOut,
    ExperienceCreate, ExperienceUpdate, ExperienceOut,
    TestimonialCreate, TestimonialUpdate, TestimonialOut,
    BlogPostCreate, BlogPostUpdate, BlogPostOut,
    CommentCreate, CommentOut,
)
from .engagement import VisitorMessageCreate, VisitorMessageOut, VisitRequest, AnalyticsOut
from .upload import UploadResult
