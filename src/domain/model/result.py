"""Outcome type returned by every fallible port and service call."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from domain.model.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: DomainError


Outcome = Union[Success[T], Failure]
