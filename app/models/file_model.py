from database import Base
from sqlalchemy import Column, Integer, String, DateTime, BIGINT


class FileRecord(Base):
    __tablename__ = "files"
    id = Column(Integer, primary_key=True, index=True)
    filename = Column(String, nullable=False)
    storage_path = Column(String, unique=True, nullable=False)
    size = Column(BIGINT, nullable=False)
    upload_date = Column(DateTime(timezone=True), nullable=False, index=True)
