from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ClassSection:
    """Domain entity: a class with one owning teacher and its enrolled students."""

    class_id: str
    name: str
    schedule: str
    teacher_id: str
    student_ids: Tuple[str, ...] = field(default_factory=tuple)

    def is_owned_by(self, user_id: str) -> bool:
        return self.teacher_id == user_id

    def has_student(self, user_id: str) -> bool:
        return user_id in self.student_ids
