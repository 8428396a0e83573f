"""Request-scoped dependencies."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings
from ..db.repositories import UserRepository, WorkoutRepository
from ..errors import AuthenticationError
from ..services.accounts import AccountService
from ..services.dashboard import DashboardService
from ..services.workout_log import WorkoutLogService

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    return request.app.state.settings


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    return UserRepository(settings.db_path)


def get_workout_repo(settings: Settings = Depends(get_settings)) -> WorkoutRepository:
    return WorkoutRepository(settings.db_path)


def get_account_service(
    settings: Settings = Depends(get_settings),
    user_repo: UserRepository = Depends(get_user_repo),
) -> AccountService:
    return AccountService(settings, user_repo)


def get_dashboard_service(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> DashboardService:
    return DashboardService(workout_repo, user_repo)


def get_workout_log_service(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> WorkoutLogService:
    return WorkoutLogService(workout_repo, user_repo)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    accounts: AccountService = Depends(get_account_service),
) -> int:
    """Resolve the bearer token to a user id."""
    if credentials is None:
        raise AuthenticationError("You are not authenticated!")
    return accounts.verify_token(credentials.credentials)
