from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..core.exceptions import ValidationError
from .model import ClassSection
from .repository import ClassRepository


class InMemoryClassRepository(ClassRepository):
    def __init__(self):
        self._lock = threading.Lock()
        # dicts keep insertion order, which is the listing order
        self._by_id: Dict[str, ClassSection] = {}

    def get_by_id(self, class_id: str) -> Optional[ClassSection]:
        return self._by_id.get(class_id)

    def list_for_teacher(self, teacher_id: str) -> List[ClassSection]:
        return [c for c in list(self._by_id.values()) if c.teacher_id == teacher_id]

    def list_for_student(self, student_id: str) -> List[ClassSection]:
        return [c for c in list(self._by_id.values()) if student_id in c.student_ids]

    def add(self, section: ClassSection) -> None:
        with self._lock:
            if section.class_id in self._by_id:
                raise ValidationError(f"Class id already exists: {section.class_id}")
            self._by_id[section.class_id] = section
