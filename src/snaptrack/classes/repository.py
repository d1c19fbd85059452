from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassSection


class ClassRepository(Protocol):
    """Roster store interface.

    Read methods are plain filters; role checks belong to the access policy.
    """

    def get_by_id(self, class_id: str) -> Optional[ClassSection]:
        raise NotImplementedError

    def list_for_teacher(self, teacher_id: str) -> Sequence[ClassSection]:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[ClassSection]:
        raise NotImplementedError

    def add(self, section: ClassSection) -> None:
        raise NotImplementedError
