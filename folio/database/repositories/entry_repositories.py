from .base import OwnedRepository
from ..models import BlogPost, Experience, Skill, Testimonial


class SkillRepository(OwnedRepository[Skill]):
    model = Skill
    id_field = "skill_id"
    writable_fields = frozenset({"skill_name", "proficiency_level"})
    order_by = (Skill.skill_name,)
    not_found_message = "Skill not found"
    not_found_code = "SKILL_NOT_FOUND"


class ExperienceRepository(OwnedRepository[Experience]):
    model = Experience
    id_field = "experience_id"
    writable_fields = frozenset({"title", "description", "start_date", "end_date"})
    order_by = (Experience.start_date.desc(),)
    not_found_message = "Experience not found"
    not_found_code = "EXPERIENCE_NOT_FOUND"


class TestimonialRepository(OwnedRepository[Testimonial]):
    model = Testimonial
    id_field = "testimonial_id"
    writable_fields = frozenset({"client_name", "feedback"})
    order_by = (Testimonial.client_name,)
    not_found_message = "Testimonial not found"
    not_found_code = "TESTIMONIAL_NOT_FOUND"


class BlogPostRepository(OwnedRepository[BlogPost]):
    model = BlogPost
    id_field = "post_id"
    writable_fields = frozenset({"title", "content"})
    order_by = (BlogPost.created_at.desc(),)
    not_found_message = "Blog post not found"
    not_found_code = "POST_NOT_FOUND"
