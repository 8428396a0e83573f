"""Parser for the workout log shorthand.

A submission is a `;`-separated list of category blocks. Each block holds
the fields of one workout on separate lines:

    #Legs
    @Back Squat
    -4 setsX12 reps
    -60 kg
    -30 min

Field positions are fixed: header, name, sets/reps, weight, duration.
"""

import re

from ..errors import MalformedLogError
from ..models.workout import WorkoutDraft

BLOCK_SEPARATOR = ";"
CATEGORY_MARKER = "#"
MIN_BLOCK_PARTS = 5

# Upper bounds for a single workout
MAX_COUNT = 10_000
MAX_WEIGHT_KG = 10_000
MAX_DURATION_MIN = 24 * 60

SETS_REPS_PATTERN = re.compile(
    r"^(?P<sets>\d+)\s*sets\s*[xX*,\-]?\s*(?P<reps>\d+)\s*reps$",
    re.IGNORECASE | re.ASCII,
)
WEIGHT_PATTERN = re.compile(
    r"^(?P<value>\d+(?:\.\d+)?)\s*kgs?$", re.IGNORECASE | re.ASCII
)
DURATION_PATTERN = re.compile(
    r"^(?P<value>\d+(?:\.\d+)?)\s*min(?:s|utes?)?$", re.IGNORECASE | re.ASCII
)


def _missing(position: int) -> MalformedLogError:
    return MalformedLogError(
        f"Workout string is missing for {position}th workout", position=position
    )


def _invalid(field: str, position: int, token: str) -> MalformedLogError:
    return MalformedLogError(
        f"Invalid {field} for {position}th workout: {token!r}",
        position=position,
        field=field,
    )


def _strip_marker(token: str) -> str:
    """Drop the single leading marker character (`@`, `-`, `*`, ...) if present."""
    token = token.strip()
    if token and not token[0].isalnum():
        token = token[1:]
    return token.strip()


def _parse_count(value: str, field: str, position: int, token: str) -> int:
    """Parse a positive integer field of at most MAX_COUNT."""
    if len(value) > len(str(MAX_COUNT)):
        raise _invalid(field, position, token)
    count = int(value)
    if count <= 0 or count > MAX_COUNT:
        raise _invalid(field, position, token)
    return count


def _parse_amount(
    pattern: re.Pattern, maximum: float, field: str, position: int, token: str
) -> float:
    """Parse a unit-suffixed number between 0 and `maximum`."""
    match = pattern.match(_strip_marker(token))
    if not match:
        raise _invalid(field, position, token)
    amount = float(match.group("value"))
    if amount > maximum:
        raise _invalid(field, position, token)
    return amount


def tokenize(text: str) -> list[tuple[int, str]]:
    """Split a submission into category blocks.

    Args:
        text: Raw workout log string

    Returns:
        (position, block) pairs, positions 1-based

    Raises:
        MalformedLogError: If no block is a category header, or any
            block is not one
    """
    lines = [line.strip() for line in text.split(BLOCK_SEPARATOR)]

    if not any(line.startswith(CATEGORY_MARKER) for line in lines):
        raise MalformedLogError("No categories found in workout string")

    blocks = []
    for position, line in enumerate(lines, start=1):
        if not line.startswith(CATEGORY_MARKER):
            raise _missing(position)
        blocks.append((position, line))
    return blocks


def parse_workout_block(block: str, position: int = 1) -> WorkoutDraft:
    """Parse one category block into a workout draft.

    Args:
        block: Category block, fields separated by line breaks
        position: 1-based position of the block, used in error messages

    Returns:
        The parsed workout

    Raises:
        MalformedLogError: If the block is too short or any field is invalid
    """
    parts = [part.strip() for part in block.splitlines()]
    parts = [part for part in parts if part]

    if len(parts) < MIN_BLOCK_PARTS:
        raise _missing(position)

    header, name_token, sets_reps_token, weight_token, duration_token = parts[
        :MIN_BLOCK_PARTS
    ]

    category = header[len(CATEGORY_MARKER):].strip()
    if not category:
        raise _invalid("category", position, header)

    workout_name = _strip_marker(name_token)
    if not workout_name:
        raise _invalid("workout name", position, name_token)

    match = SETS_REPS_PATTERN.match(_strip_marker(sets_reps_token))
    if not match:
        raise _invalid("sets/reps", position, sets_reps_token)
    sets = _parse_count(match.group("sets"), "sets", position, sets_reps_token)
    reps = _parse_count(match.group("reps"), "reps", position, sets_reps_token)

    weight = _parse_amount(
        WEIGHT_PATTERN, MAX_WEIGHT_KG, "weight", position, weight_token
    )
    duration = _parse_amount(
        DURATION_PATTERN, MAX_DURATION_MIN, "duration", position, duration_token
    )

    return WorkoutDraft(
        category=category,
        workout_name=workout_name,
        sets=sets,
        reps=reps,
        weight=weight,
        duration=duration,
    )


def parse_workout_log(text: str) -> list[WorkoutDraft]:
    """Parse a whole submission. Any invalid block rejects all of it."""
    return [parse_workout_block(block, position) for position, block in tokenize(text)]
