from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.responses import FileResponse

from dependencies import get_ingestion_service
from errors import PersistenceError, StorageError
from schemas.file_schema import FileResponse as FileRecordResponse, UploadResponse
from services.ingestion import IngestionService

router = APIRouter()


@router.post("/upload", response_model=UploadResponse,
             summary="Upload a single file",
             description="""
                            Stores the uploaded bytes under a unique name and records the
                            original file name, the size and the upload date.
                          """,
             responses={
                 422: {"description": "No file was sent"},
                 500: {"description": "The file or its metadata could not be saved"},
             })
def upload_file(file: UploadFile = File(...), ingestion: IngestionService = Depends(get_ingestion_service)):
    try:
        record = ingestion.upload(file.file, file.filename or "unnamed", file.size)
    except (StorageError, PersistenceError) as error:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(error)})

    return UploadResponse(message="File uploaded successfully", file=FileRecordResponse.model_validate(record))


@router.get("/files", response_model=list[FileRecordResponse],
            summary="Lists every uploaded file",
            description="""
                            Metadata of all uploaded files, oldest first.
                        """)
def list_files(ingestion: IngestionService = Depends(get_ingestion_service)):
    try:
        files = ingestion.list_files()
    except PersistenceError as error:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(error)})
    return [FileRecordResponse.model_validate(file) for file in files]


@router.get("/uploads/{storage_path}",
            summary="Downloading stored bytes",
            responses={
                404: {"description": "File not found"},
                200: {"description": "Raw file content",
                      "content": {"application/octet-stream": {}}},
            })
def download_file(storage_path: str, request: Request):
    storage = request.app.state.storage
    if not storage.exists(storage_path):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "File not found"})

    return FileResponse(
        path=storage.path_for(storage_path),
        media_type="application/octet-stream",
    )
