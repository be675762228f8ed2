from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

AlgorithmType = Literal["array", "linkedlist", "tree"]


@dataclass(frozen=True)
class Step:
    title: str
    description: str


@dataclass(frozen=True)
class Algorithm:
    """A catalog entry: one operation plus everything needed to present it."""
    key: str
    title: str
    description: str
    time_complexity: str
    space_complexity: str
    type: AlgorithmType
    code: str
    steps: Tuple[Step, ...]
