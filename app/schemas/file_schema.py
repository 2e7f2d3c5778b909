from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class FileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., examples=[1], description="File identification number")
    filename: str = Field(..., examples=["note.txt"], description="File name provided by the client")
    storage_path: str = Field(..., serialization_alias="storagePath", examples=["1718000000000-note.txt"],
                              description="Name of the stored bytes inside the upload directory")
    size: int = Field(..., examples=[5], description="File size in bytes")
    upload_date: datetime = Field(..., serialization_alias="uploadDate", examples=["2025-09-03T12:34:56Z"])


class UploadResponse(BaseModel):
    message: str = Field(..., examples=["File uploaded successfully"])
    file: FileResponse
