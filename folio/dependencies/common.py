from typing import Optional

from fastapi import Request
from redis.asyncio import Redis

from ..config import Settings
from ..contracts.notifications import IPasswordResetNotifier
from ..services.upload_service import UploadStorage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_redis(request: Request) -> Optional[Redis]:
    return request.app.state.redis


def get_notifier(request: Request) -> IPasswordResetNotifier:
    return request.app.state.notifier


def get_upload_storage(request: Request) -> UploadStorage:
    return request.app.state.upload_storage
