from fastapi import APIRouter, Depends, HTTPException, status
from starlette.responses import JSONResponse

from dependencies import get_auth_service, get_current_user
from errors import InvalidCredentials, PersistenceError, UserNotFound
from models.user_model import User
from schemas.user_schema import LoginResponse, SignupResponse, UserCreate, UserLogin, UserResponse
from services.auth_service import AuthService

router = APIRouter()


@router.post("/signup", summary="new user registration", response_model=SignupResponse,
             description="""
                Creates a new user from the data provided. No field is required and
                the email is not checked for uniqueness. The password is stored hashed.
             """,
             responses={
                 201: {"description": "User created"},
                 500: {"description": "The user could not be saved"},
             },
             status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, auth: AuthService = Depends(get_auth_service)):
    try:
        new_user = auth.signup(user.full_name, user.email, user.password)
    except PersistenceError as error:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(error)})

    return SignupResponse(message="User registered successfully!", user=UserResponse.model_validate(new_user))


@router.post("/login", response_model=LoginResponse, summary="User login to account",
             description="""
                User logs in with email and password.
                Returns a JWT access token valid for one hour and the id of the user.
             """,
             responses={
                 400: {"description": "User not found or incorrect password",
                       "content": {
                           "application/json": {
                               "examples": {
                                   "not_found": {"value": {"detail": "User not found!"}},
                                   "wrong_password": {"value": {"detail": "Incorrect password!"}},
                               }
                           }
                       }
                       },
             })
def login(user: UserLogin, auth: AuthService = Depends(get_auth_service)):
    try:
        result = auth.login(user.email, user.password)
    except (UserNotFound, InvalidCredentials) as error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    except PersistenceError as error:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(error)})

    return LoginResponse(token=result.token, user_id=result.user_id)


@router.get("/me", response_model=UserResponse,
            summary="Displaying the logged-in user",
            responses={
                401: {"description": "Could not validate credentials"}
            })
def read_current_user(user: User = Depends(get_current_user)):
    return user
