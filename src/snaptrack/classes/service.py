from __future__ import annotations

from typing import Iterable, List

from ..common.validators import require_non_empty
from ..core import policy
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.model import Caller
from ..users.repository import UserRepository
from .model import ClassSection
from .repository import ClassRepository


class RosterService:
    """Use case: role-scoped class listings and class registration."""

    def __init__(self, classes: ClassRepository, users: UserRepository):
        self._classes = classes
        self._users = users

    def classes_for_teacher(self, caller: Caller) -> List[ClassSection]:
        policy.ensure_can_list_classes_for(caller, Role.TEACHER)
        return list(self._classes.list_for_teacher(caller.user_id))

    def classes_for_student(self, caller: Caller) -> List[ClassSection]:
        policy.ensure_can_list_classes_for(caller, Role.STUDENT)
        return list(self._classes.list_for_student(caller.user_id))

    def register_class(
        self,
        *,
        class_id: str,
        name: str,
        schedule: str,
        teacher_id: str,
        student_ids: Iterable[str] = (),
    ) -> ClassSection:
        teacher = self._users.get_by_id(teacher_id)
        if not teacher or teacher.role != Role.TEACHER:
            raise ValidationError(f"Teacher does not exist: {teacher_id}")

        students = tuple(student_ids)
        if len(set(students)) != len(students):
            raise ValidationError("A student is listed twice in the class")
        for sid in students:
            student = self._users.get_by_id(sid)
            if not student or student.role != Role.STUDENT:
                raise ValidationError(f"Student does not exist: {sid}")

        section = ClassSection(
            class_id=require_non_empty(class_id, "Class id"),
            name=require_non_empty(name, "Class name"),
            schedule=schedule or "",
            teacher_id=teacher_id,
            student_ids=students,
        )
        self._classes.add(section)
        return section
