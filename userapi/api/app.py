"""FastAPI web application for userapi."""

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from userapi.api.error_handlers import register_error_handlers
from userapi.api.user_models import (
    CreateUserRequest,
    HealthResponse,
    UpdateUserRequest,
    UserOut,
    UserResponse,
    UsersResponse,
)
from userapi.config import Settings, load_settings
from userapi.models.constants import SERVICE_VERSION, USERS_PATH
from userapi.storage.user_store import UserStore

logger = logging.getLogger(__name__)


def get_user_store(request: Request) -> UserStore:
    """Store owned by the running application (dependency for FastAPI)."""
    return request.app.state.user_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def create_app(store: Optional[UserStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around a single UserStore.

    Args:
        store: Store to serve (a fresh empty store by default)
        settings: Settings to use (loaded from the environment by default)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="userapi",
        description="CRUD API over an in-memory user store",
        version=SERVICE_VERSION,
    )
    app.state.user_store = store if store is not None else UserStore()
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    @app.get("/", response_model=HealthResponse)
    def health(settings: Settings = Depends(get_settings)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service=settings.service_name,
            timestamp=int(time.time()),
        )

    @app.get(USERS_PATH, response_model=UsersResponse)
    def list_users(store: UserStore = Depends(get_user_store)):
        """List all users."""
        users = [UserOut.from_user(user) for user in store.list_users()]
        return UsersResponse(users=users, count=len(users))

    @app.get(USERS_PATH + "/{user_id}", response_model=UserResponse)
    def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
        """Get a user by ID."""
        return UserResponse(user=UserOut.from_user(store.get_user(user_id)))

    @app.post(USERS_PATH, response_model=UserResponse, status_code=status.HTTP_201_CREATED)
    def create_user(payload: CreateUserRequest, store: UserStore = Depends(get_user_store)):
        """Create a user."""
        user = store.create_user(payload.name, payload.email)
        logger.debug(f"Created user {user.id}: {user.email}")
        return UserResponse(user=UserOut.from_user(user))

    @app.put(USERS_PATH + "/{user_id}", response_model=UserResponse)
    def update_user(
        user_id: str,
        payload: UpdateUserRequest,
        store: UserStore = Depends(get_user_store),
    ):
        """Update the supplied fields of a user."""
        user = store.update_user(user_id, name=payload.name, email=payload.email)
        logger.debug(f"Updated user {user.id}")
        return UserResponse(user=UserOut.from_user(user))

    @app.delete(USERS_PATH + "/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_user(user_id: str, store: UserStore = Depends(get_user_store)):
        """Delete a user."""
        store.delete_user(user_id)
        logger.debug(f"Deleted user {user_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
