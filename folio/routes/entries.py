from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies.ownership_dependencies import (
    owned_experience_id,
    owned_post_id,
    owned_skill_id,
    owned_testimonial_id,
    owned_user_id,
)
from ..dependencies.portfolio_dependencies import (
    get_blog_post_service,
    get_experience_service,
    get_skill_service,
    get_testimonial_service,
)
from ..dto.portfolio import (
    BlogPostCreate, BlogPostOut, BlogPostUpdate,
    ExperienceCreate, ExperienceOut, ExperienceUpdate,
    SkillCreate, SkillOut, SkillUpdate,
    TestimonialCreate, TestimonialOut, TestimonialUpdate,
)
from ..services.portfolio_service import EntryService, ExperienceService

router = APIRouter(prefix="/api", tags=["portfolio"])


# Skills

@router.get("/users/{user_id}/skills", response_model=List[SkillOut])
async def list_skills(user_id: str, service: EntryService = Depends(get_skill_service)):
    return await service.list_for_user(user_id)


@router.post("/users/{user_id}/skills", response_model=SkillOut, status_code=status.HTTP_201_CREATED)
async def create_skill(
    payload: SkillCreate,
    user_id: str = Depends(owned_user_id),
    service: EntryService = Depends(get_skill_service),
):
    return await service.create(user_id, payload)


@router.patch("/skills/{skill_id}", response_model=SkillOut)
async def update_skill(
    payload: SkillUpdate,
    skill_id: str = Depends(owned_skill_id),
    service: EntryService = Depends(get_skill_service),
):
    return await service.update(skill_id, payload)


@router.delete("/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(
    skill_id: str = Depends(owned_skill_id),
    service: EntryService = Depends(get_skill_service),
):
    await service.delete(skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Experience timeline

@router.get("/users/{user_id}/experience", response_model=List[ExperienceOut])
async def list_experience(user_id: str, service: ExperienceService = Depends(get_experience_service)):
    return await service.list_for_user(user_id)


@router.post("/users/{user_id}/experience", response_model=ExperienceOut, status_code=status.HTTP_201_CREATED)
async def create_experience(
    payload: ExperienceCreate,
    user_id: str = Depends(owned_user_id),
    service: ExperienceService = Depends(get_experience_service),
):
    return await service.create(user_id, payload)


@router.patch("/experience/{experience_id}", response_model=ExperienceOut)
async def update_experience(
    payload: ExperienceUpdate,
    experience_id: str = Depends(owned_experience_id),
    service: ExperienceService = Depends(get_experience_service),
):
    return await service.update(experience_id, payload)


@router.delete("/experience/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_experience(
    experience_id: str = Depends(owned_experience_id),
    service: ExperienceService = Depends(get_experience_service),
):
    await service.delete(experience_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Testimonials

@router.get("/users/{user_id}/testimonials", response_model=List[TestimonialOut])
async def list_testimonials(user_id: str, service: EntryService = Depends(get_testimonial_service)):
    return await service.list_for_user(user_id)


@router.post("/users/{user_id}/testimonials", response_model=TestimonialOut, status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    payload: TestimonialCreate,
    user_id: str = Depends(owned_user_id),
    service: EntryService = Depends(get_testimonial_service),
):
    return await service.create(user_id, payload)


@router.patch("/testimonials/{testimonial_id}", response_model=TestimonialOut)
async def update_testimonial(
    payload: TestimonialUpdate,
    testimonial_id: str = Depends(owned_testimonial_id),
    service: EntryService = Depends(get_testimonial_service),
):
    return await service.update(testimonial_id, payload)


@router.delete("/testimonials/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_testimonial(
    testimonial_id: str = Depends(owned_testimonial_id),
    service: EntryService = Depends(get_testimonial_service),
):
    await service.delete(testimonial_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Blog posts

@router.get("/users/{user_id}/blog-posts", response_model=List[BlogPostOut])
async def list_blog_posts(user_id: str, service: EntryService = Depends(get_blog_post_service)):
    return await service.list_for_user(user_id)


@router.post("/users/{user_id}/blog-posts", response_model=BlogPostOut, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    payload: BlogPostCreate,
    user_id: str = Depends(owned_user_id),
    service: EntryService = Depends(get_blog_post_service),
):
    return await service.create(user_id, payload)


@router.patch("/blog-posts/{post_id}", response_model=BlogPostOut)
async def update_blog_post(
    payload: BlogPostUpdate,
    post_id: str = Depends(owned_post_id),
    service: EntryService = Depends(get_blog_post_service),
):
    return await service.update(post_id, payload)


@router.delete("/blog-posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(
    post_id: str = Depends(owned_post_id),
    service: EntryService = Depends(get_blog_post_service),
):
    await service.delete(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
