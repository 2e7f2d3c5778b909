from datetime import datetime

from sqlalchemy.orm import Session

from database import Collection
from models.file_model import FileRecord


class FileStore:
    def __init__(self, session: Session):
        self.files = Collection(session, FileRecord)

    def create(self, filename: str, storage_path: str, size: int, upload_date: datetime) -> FileRecord:
        return self.files.create(filename=filename, storage_path=storage_path, size=size, upload_date=upload_date)

    def find_all(self) -> list[FileRecord]:
        """All records in insertion order."""
        return self.files.find(order_by=(FileRecord.id,))
