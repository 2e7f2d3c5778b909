"""Store handle and the generic collection used by the credential and file stores."""
import logging
from typing import Generic, Optional, TypeVar

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

from errors import PersistenceError

logger = logging.getLogger(__name__)

Base = declarative_base()

ModelT = TypeVar("ModelT")


class Database:
    """One engine and session factory, opened at startup and closed at shutdown."""

    def __init__(self, url: str):
        options = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            options["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                options["poolclass"] = StaticPool
        self.url = url
        self.engine = sa.create_engine(url, **options)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def close(self):
        self.engine.dispose()
        logger.info("Database connection closed")


class Collection(Generic[ModelT]):
    """create / find-one / find-many over a single mapped model."""

    def __init__(self, session: Session, model: type[ModelT]):
        self.session = session
        self.model = model

    def create(self, **fields) -> ModelT:
        document = self.model(**fields)
        try:
            self.session.add(document)
            self.session.commit()
            self.session.refresh(document)
        except SQLAlchemyError as error:
            self.session.rollback()
            raise PersistenceError(f"Could not save {self.model.__name__}: {error}") from error
        return document

    def find_one(self, *criteria, order_by=None) -> Optional[ModelT]:
        query = self.session.query(self.model).filter(*criteria)
        if order_by is not None:
            query = query.order_by(*order_by)
        try:
            return query.first()
        except SQLAlchemyError as error:
            self.session.rollback()
            raise PersistenceError(f"Could not read {self.model.__name__}: {error}") from error

    def find(self, *criteria, order_by=None) -> list[ModelT]:
        query = self.session.query(self.model).filter(*criteria)
        if order_by is not None:
            query = query.order_by(*order_by)
        try:
            return query.all()
        except SQLAlchemyError as error:
            self.session.rollback()
            raise PersistenceError(f"Could not read {self.model.__name__}: {error}") from error


def get_db(request: Request):
    database = request.app.state.database.session()
    try:
        yield database
    finally:
        database.close()
