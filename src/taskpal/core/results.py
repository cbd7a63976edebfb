# src/taskpal/core/results.py

from __future__ import annotations

from dataclasses import dataclass

from .errors import ErrorKind


@dataclass(frozen=True, slots=True)
class Ok:
    message: str


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind
    detail: str


Result = Ok | Err
