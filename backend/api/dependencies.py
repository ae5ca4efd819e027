"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from shared.security import JwtTokenIssuer, PasswordEncoder
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserRepository, IUserService, IUserAdminService
    from modules.todos.interfaces import ITodoRepository, ITodoService, IWeatherClient
    from modules.comments.interfaces import ICommentRepository, ICommentAdminService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self.reset()

    # -------------------------------------------------------------------------
    # Collaborators
    # -------------------------------------------------------------------------

    @property
    def db(self) -> "Client":
        """Get the Supabase service-role client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def password_encoder(self) -> "PasswordEncoder":
        """Get the password encoder."""
        if self._password_encoder is None:
            from shared.security import PasswordEncoder
            self._password_encoder = PasswordEncoder()
        return self._password_encoder

    @property
    def token_issuer(self) -> "JwtTokenIssuer":
        """Get the token issuer, configured from settings."""
        if self._token_issuer is None:
            from shared.config import get_settings
            from shared.security import JwtTokenIssuer
            settings = get_settings()
            self._token_issuer = JwtTokenIssuer(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expiration_minutes=settings.jwt_expiration_minutes,
            )
        return self._token_issuer

    @property
    def weather_client(self) -> "IWeatherClient":
        """Get the weather provider client."""
        if self._weather_client is None:
            from shared.config import get_settings
            from modules.todos.weather import WeatherClient
            settings = get_settings()
            self._weather_client = WeatherClient(
                api_url=settings.weather_api_url,
                timeout=settings.weather_timeout_seconds,
            )
        return self._weather_client

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def todo_repository(self) -> "ITodoRepository":
        """Get the todo repository instance."""
        if self._todo_repository is None:
            from modules.todos.repository import TodoRepository
            self._todo_repository = TodoRepository(self.db)
        return self._todo_repository

    @property
    def comment_repository(self) -> "ICommentRepository":
        """Get the comment repository instance."""
        if self._comment_repository is None:
            from modules.comments.repository import CommentRepository
            self._comment_repository = CommentRepository(self.db)
        return self._comment_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                user_repository=self.user_repository,
                password_encoder=self.password_encoder,
                token_issuer=self.token_issuer,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                user_repository=self.user_repository,
                password_encoder=self.password_encoder,
            )
        return self._user_service

    @property
    def user_admin(self) -> "IUserAdminService":
        """Get the user admin service instance."""
        if self._user_admin_service is None:
            from modules.users.admin_service import UserAdminService
            self._user_admin_service = UserAdminService(self.user_repository)
        return self._user_admin_service

    @property
    def todos(self) -> "ITodoService":
        """Get the todo service instance."""
        if self._todo_service is None:
            from modules.todos.service import TodoService
            self._todo_service = TodoService(
                todo_repository=self.todo_repository,
                weather_client=self.weather_client,
            )
        return self._todo_service

    @property
    def comment_admin(self) -> "ICommentAdminService":
        """Get the comment admin service instance."""
        if self._comment_admin_service is None:
            from modules.comments.admin_service import CommentAdminService
            self._comment_admin_service = CommentAdminService(self.comment_repository)
        return self._comment_admin_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._password_encoder = None
        self._token_issuer = None
        self._weather_client = None
        self._user_repository = None
        self._todo_repository = None
        self._comment_repository = None
        self._auth_service = None
        self._user_service = None
        self._user_admin_service = None
        self._todo_service = None
        self._comment_admin_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_issuer() -> "JwtTokenIssuer":
    """Token issuer used by the JWT middleware."""
    return get_container().token_issuer


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_user_admin_service() -> "IUserAdminService":
    """FastAPI dependency for user admin service."""
    return get_container().user_admin


def get_todo_service() -> "ITodoService":
    """FastAPI dependency for todo service."""
    return get_container().todos


def get_comment_admin_service() -> "ICommentAdminService":
    """FastAPI dependency for comment admin service."""
    return get_container().comment_admin
