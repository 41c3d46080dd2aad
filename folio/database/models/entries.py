from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text

from ..base import Base, new_id, utcnow


class Skill(Base):
    __tablename__ = "skills"

    skill_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), index=True, nullable=False)
    skill_name = Column(String(255), nullable=False)
    proficiency_level = Column(Integer, nullable=True)


class Experience(Base):
    __tablename__ = "experience_timeline"

    experience_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)


class Testimonial(Base):
    __tablename__ = "testimonials"

    testimonial_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), index=True, nullable=False)
    client_name = Column(String(255), nullable=False)
    feedback = Column(Text, nullable=True)


class BlogPost(Base):
    __tablename__ = "blog_posts"

    post_id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.user_id"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
