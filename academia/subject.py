"""Subjects of the academic system and their prerequisites."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional

from academia.linked_list import CircularList

NAME_MAX_LENGTH = 99


@dataclass(eq=False)
class Subject:
    """A subject with credits and a list of correlative (prerequisite) subject ids."""

    id: int
    name: str
    credits: int
    correlatives: CircularList = field(default_factory=CircularList)

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    @classmethod
    def create(cls, name: str, credits: int) -> "Subject":
        """Build a subject with the next sequential id and no correlatives."""
        return cls(next(cls._ids), name[:NAME_MAX_LENGTH], credits)

    def __str__(self) -> str:
        return (
            f"[ID: {self.id}] {self.name} | Credits: {self.credits} "
            f"| Correlatives: {len(self.correlatives)}"
        )


def compare_subject_by_id(a: Optional[Subject], b: Optional[Subject]) -> bool:
    """True when both subjects are given and share the same id."""
    if a is None or b is None:
        return False
    return a.id == b.id