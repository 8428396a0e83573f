"""User, workout and dashboard routes."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query

from ...errors import ValidationError
from ...services.accounts import AccountService
from ...services.dashboard import DashboardService
from ...services.workout_log import WorkoutLogService
from ..dependencies import (
    get_account_service,
    get_current_user_id,
    get_dashboard_service,
    get_workout_log_service,
)
from ..schemas import UserSignin, UserSignup, WorkoutSubmission

router = APIRouter(prefix="/api/user", tags=["user"])


def parse_query_date(value: str | None) -> date | None:
    """Parse a `?date=` value (date or full timestamp)."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None


@router.post("/signup")
async def signup(
    body: UserSignup,
    accounts: AccountService = Depends(get_account_service),
):
    """Register a new user."""
    token, user = await accounts.register(body.name, body.email, body.password, body.img)
    return {"token": token, "user": user.to_dict()}


@router.post("/signin")
async def signin(
    body: UserSignin,
    accounts: AccountService = Depends(get_account_service),
):
    """Sign in an existing user."""
    token, user = await accounts.login(body.email, body.password)
    return {"token": token, "user": user.to_dict()}


@router.get("/dashboard")
async def dashboard(
    date_param: str | None = Query(None, alias="date"),
    user_id: int = Depends(get_current_user_id),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Daily totals, category breakdown and 7-day trend."""
    return await service.dashboard(user_id, parse_query_date(date_param))


@router.get("/workout")
async def get_workouts_by_date(
    date_param: str | None = Query(None, alias="date"),
    user_id: int = Depends(get_current_user_id),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Workouts logged on one day."""
    day_workouts = await service.workouts_by_date(user_id, parse_query_date(date_param))
    return day_workouts.to_dict()


@router.post("/workout", status_code=201)
async def add_workout(
    body: WorkoutSubmission,
    user_id: int = Depends(get_current_user_id),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    """Parse a workout shorthand string and store its workouts."""
    records = await service.add_workouts(user_id, body.workoutString)
    return {
        "message": "Workouts added successfully",
        "workouts": [r.to_dict() for r in records],
    }
