"""Workout shorthand parsing."""

from .shorthand import parse_workout_block, parse_workout_log, tokenize

__all__ = ["parse_workout_block", "parse_workout_log", "tokenize"]
