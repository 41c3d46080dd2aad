from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies.ownership_dependencies import existing_project_id, owned_project_id, owned_user_id
from ..dependencies.portfolio_dependencies import get_project_service
from ..dto.portfolio import CommentCreate, CommentOut, ProjectCreate, ProjectOut, ProjectUpdate
from ..services.portfolio_service import ProjectService

router = APIRouter(prefix="/api", tags=["projects"])


@router.get("/users/{user_id}/projects", response_model=List[ProjectOut])
async def list_projects(
    user_id: str,
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.list_for_user(user_id)


@router.post("/users/{user_id}/projects", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreate,
    user_id: str = Depends(owned_user_id),
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.create(user_id, payload)


@router.get("/projects/{project_id}", response_model=ProjectOut)
async def get_project(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.get(project_id)


@router.patch("/projects/{project_id}", response_model=ProjectOut)
async def update_project(
    payload: ProjectUpdate,
    project_id: str = Depends(owned_project_id),
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.update(project_id, payload)


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str = Depends(owned_project_id),
    project_service: ProjectService = Depends(get_project_service),
):
    await project_service.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/projects/{project_id}/comments", response_model=List[CommentOut])
async def list_comments(
    project_id: str,
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.list_comments(project_id)


@router.post("/projects/{project_id}/comments", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def add_comment(
    payload: CommentCreate,
    project_id: str = Depends(existing_project_id),
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.add_comment(project_id, payload)
