from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from config import Settings
from database import get_db
from models.user_model import User
from services.auth_service import AuthService
from services.file_store import FileStore
from services.ingestion import IngestionService
from services.user_store import UserStore

oauth2_scheme = HTTPBearer()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(UserStore(db), settings.secret_key, settings.algorithm,
                       token_ttl=settings.token_ttl)


def get_ingestion_service(request: Request, db: Session = Depends(get_db)) -> IngestionService:
    return IngestionService(FileStore(db), request.app.state.storage, request.app.state.namer)


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(oauth2_scheme),
                     auth: AuthService = Depends(get_auth_service)) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user = auth.current_user(credentials.credentials)
    if user is None:
        raise credentials_exception
    return user
