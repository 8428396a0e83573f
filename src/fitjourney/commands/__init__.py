"""CLI commands for fitjourney."""

from .dashboard import dashboard
from .init import init
from .log import log
from .serve import serve
from .users import users
from .workouts import workouts

__all__ = [
    "dashboard",
    "init",
    "log",
    "serve",
    "users",
    "workouts",
]
