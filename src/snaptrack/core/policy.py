"""Access policy for rosters and attendance.

Every rule is role-exclusive and ownership-exclusive: a teacher only ever reaches
classes they own, a student only classes they are enrolled in, and a caller
presenting the wrong role for an endpoint is refused even when the data would
otherwise match.

The ``can_*`` predicates are pure. The ``ensure_*`` variants raise the domain
error that the HTTP layer turns into a status code.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..classes.model import ClassSection
from ..users.model import Caller
from .constants import CLASS_NOT_FOUND_MESSAGE
from .enums import Role
from .exceptions import AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)


def can_list_classes_for(caller: Caller, audience: Role) -> bool:
    return caller.role == audience


def can_mark_attendance(caller: Caller, section: Optional[ClassSection]) -> bool:
    return caller.is_teacher and section is not None and section.is_owned_by(caller.user_id)


def can_view_attendance(caller: Caller, section: Optional[ClassSection]) -> bool:
    if section is None:
        return False
    if caller.is_teacher:
        return section.is_owned_by(caller.user_id)
    if caller.is_student:
        return section.has_student(caller.user_id)
    return False


def ensure_can_list_classes_for(caller: Caller, audience: Role) -> None:
    if not can_list_classes_for(caller, audience):
        logger.debug("deny list classes: user=%s role=%s audience=%s", caller.user_id, caller.role.value, audience.value)
        raise AuthorizationError("Forbidden")


def ensure_can_mark_attendance(caller: Caller, section: Optional[ClassSection]) -> None:
    if not caller.is_teacher:
        logger.debug("deny mark attendance: user=%s is not a teacher", caller.user_id)
        raise AuthorizationError("Only teachers can mark attendance")

    # Missing and foreign classes are reported the same way.
    if not can_mark_attendance(caller, section):
        logger.debug("deny mark attendance: user=%s class=%s", caller.user_id, section.class_id if section else None)
        raise NotFoundError(CLASS_NOT_FOUND_MESSAGE)


def ensure_can_view_attendance(caller: Caller, section: Optional[ClassSection]) -> None:
    if can_view_attendance(caller, section):
        return

    logger.debug("deny view attendance: user=%s class=%s", caller.user_id, section.class_id if section else None)
    if caller.is_teacher:
        raise AuthorizationError("Not authorized to view this class")
    raise AuthorizationError("Not enrolled in this class")
