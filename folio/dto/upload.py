from pydantic import BaseModel, ConfigDict, Field


class UploadResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    filename: str
    original_name: str = Field(serialization_alias="originalName")
    size: int
