from __future__ import annotations

from typing import Iterable, Optional


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def join_errors(errors: Iterable[str]) -> str:
    return ", ".join(errors)
