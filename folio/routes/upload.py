from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from ..auth.entities.user import Principal
from ..core.exceptions import UploadRejected
from ..core.logger import logger
from ..dependencies.auth_dependencies import get_current_principal
from ..dependencies.common import get_upload_storage
from ..dto.upload import UploadResult
from ..services.upload_service import UploadStorage, check_declared_length

router = APIRouter(prefix="/api", tags=["upload"])

FILE_FIELD = "file"


@router.post("/upload/{upload_type}", response_model=UploadResult)
async def upload_file(
    upload_type: str,
    request: Request,
    principal: Principal = Depends(get_current_principal),
    storage: UploadStorage = Depends(get_upload_storage),
):
    check_declared_length(request.headers.get("content-length"))

    async with request.form(max_files=10) as form:
        files = [value for _, value in form.multi_items() if isinstance(value, UploadFile)]
        named = [value for value in form.getlist(FILE_FIELD) if isinstance(value, UploadFile)]

        if len(files) > 1:
            raise UploadRejected("Only one file may be uploaded per request", "TOO_MANY_FILES")
        if not named:
            raise UploadRejected("No file uploaded", "NO_FILE_UPLOADED")

        result = await storage.save(upload_type, named[0])

    logger.info(f"User {principal.id} uploaded {result.filename} to {upload_type}")
    return result
