import logging
from typing import BinaryIO, Optional

from errors import PersistenceError, StorageError
from models.file_model import FileRecord
from services.disk_storage import DiskStorage
from services.file_store import FileStore
from services.upload_namer import UploadNamer

logger = logging.getLogger(__name__)

MAX_NAME_ATTEMPTS = 5


class IngestionService:
    """Stores uploaded bytes on disk and records their metadata."""

    def __init__(self, files: FileStore, storage: DiskStorage, namer: UploadNamer):
        self.files = files
        self.storage = storage
        self.namer = namer

    def upload(self, content: BinaryIO, filename: str, size: Optional[int] = None) -> FileRecord:
        for _ in range(MAX_NAME_ATTEMPTS):
            tick = self.namer.next_tick()
            storage_path = self.storage.safe_name(self.namer.name(filename, tick))
            try:
                written = self.storage.write(storage_path, content)
                break
            except FileExistsError:
                logger.warning("Storage name %s already taken, retrying", storage_path)
        else:
            raise StorageError(f"Could not allocate a unique storage name for {filename!r}")

        try:
            record = self.files.create(
                filename=filename,
                storage_path=storage_path,
                size=size if size is not None else written,
                upload_date=self.namer.tick_to_datetime(tick),
            )
        except PersistenceError:
            # bytes stay on disk without a record; see find_orphans()
            logger.error("Stored %s but could not save its metadata", storage_path)
            raise

        logger.info("Uploaded %s as %s (%s bytes)", filename, storage_path, record.size)
        return record

    def list_files(self) -> list[FileRecord]:
        return self.files.find_all()

    def find_orphans(self) -> list[str]:
        """Stored names that no FileRecord points at."""
        recorded = {record.storage_path for record in self.files.find_all()}
        return [name for name in self.storage.list_names() if name not in recorded]
