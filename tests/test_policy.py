from __future__ import annotations

import pytest

from snaptrack.classes.model import ClassSection
from snaptrack.core import policy
from snaptrack.core.enums import Role
from snaptrack.core.exceptions import AuthorizationError, NotFoundError
from snaptrack.users.model import Caller

SECTION = ClassSection(class_id="c1", name="Algebra", schedule="", teacher_id="t1", student_ids=("s1",))

OWNER = Caller(user_id="t1", role=Role.TEACHER)
OTHER_TEACHER = Caller(user_id="t2", role=Role.TEACHER)
ENROLLED = Caller(user_id="s1", role=Role.STUDENT)
STRANGER = Caller(user_id="s9", role=Role.STUDENT)
# A student whose id happens to equal the owning teacher's id.
STUDENT_WITH_TEACHER_ID = Caller(user_id="t1", role=Role.STUDENT)


@pytest.mark.parametrize(
    "caller,audience,allowed",
    [
        (OWNER, Role.TEACHER, True),
        (OWNER, Role.STUDENT, False),
        (ENROLLED, Role.STUDENT, True),
        (ENROLLED, Role.TEACHER, False),
    ],
)
def test_list_classes_requires_matching_role(caller, audience, allowed):
    assert policy.can_list_classes_for(caller, audience) is allowed
    if not allowed:
        with pytest.raises(AuthorizationError):
            policy.ensure_can_list_classes_for(caller, audience)


def test_only_owning_teacher_can_mark():
    assert policy.can_mark_attendance(OWNER, SECTION)
    assert not policy.can_mark_attendance(OTHER_TEACHER, SECTION)
    assert not policy.can_mark_attendance(ENROLLED, SECTION)
    assert not policy.can_mark_attendance(STUDENT_WITH_TEACHER_ID, SECTION)
    assert not policy.can_mark_attendance(OWNER, None)


def test_mark_denials_are_forbidden_for_students_and_not_found_for_other_teachers():
    with pytest.raises(AuthorizationError):
        policy.ensure_can_mark_attendance(ENROLLED, SECTION)
    with pytest.raises(AuthorizationError):
        policy.ensure_can_mark_attendance(STUDENT_WITH_TEACHER_ID, None)
    with pytest.raises(NotFoundError) as foreign:
        policy.ensure_can_mark_attendance(OTHER_TEACHER, SECTION)
    with pytest.raises(NotFoundError) as missing:
        policy.ensure_can_mark_attendance(OWNER, None)
    # Same message so the response does not reveal which classes exist.
    assert str(foreign.value) == str(missing.value)


def test_view_allowed_for_owner_and_enrolled_student_only():
    assert policy.can_view_attendance(OWNER, SECTION)
    assert policy.can_view_attendance(ENROLLED, SECTION)
    assert not policy.can_view_attendance(OTHER_TEACHER, SECTION)
    assert not policy.can_view_attendance(STRANGER, SECTION)
    assert not policy.can_view_attendance(STUDENT_WITH_TEACHER_ID, SECTION)
    assert not policy.can_view_attendance(OWNER, None)

    for caller in (OTHER_TEACHER, STRANGER):
        with pytest.raises(AuthorizationError):
            policy.ensure_can_view_attendance(caller, SECTION)
    with pytest.raises(AuthorizationError):
        policy.ensure_can_view_attendance(OWNER, None)
