import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

USERNAME_PATTERN = r"^[A-Za-z0-9_]+$"
USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 50

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 1_000_000

_username_re = re.compile(USERNAME_PATTERN)


def strip_string(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def is_valid_username(value: str) -> bool:
    """Проверка формата имени пользователя"""
    return (
        isinstance(value, str)
        and USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH
        and _username_re.match(value) is not None
    )


Username = Annotated[
    str,
    BeforeValidator(strip_string),
    Field(
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        pattern=USERNAME_PATTERN,
        description="Letters, numbers and underscores, 2-50 characters",
    ),
]
