import pytest

from lexigrow.models.profile import StudentProfile
from lexigrow.models.xp_event import XPEvent
from lexigrow.repositories.profile_repository import ProfileRepository
from lexigrow.services.xp_service import XPService, level_for_xp
from lexigrow.utils.exceptions import NotFoundError, ValidationError


@pytest.fixture
def xp_service(db_session, clock):
    return XPService(db_session, clock)


def test_level_is_derived_from_xp():
    assert level_for_xp(0) == 1
    assert level_for_xp(99) == 1
    assert level_for_xp(100) == 2
    assert level_for_xp(250) == 3


def test_crossing_level_boundary(xp_service, student):
    xp_service.award(student.id, 95, "bonus")
    profile = xp_service.get_profile(student.id)
    assert (profile.xp, profile.level) == (95, 1)

    xp_service.award(student.id, 10, "mark_known_word")
    profile = xp_service.get_profile(student.id)
    assert (profile.xp, profile.level) == (105, 2)


def test_level_matches_xp_after_every_award(xp_service, student):
    for points in [10, 2, 33, 55, 100, 7, 250]:
        xp_service.award(student.id, points, "mark_known_word")
        profile = xp_service.get_profile(student.id)
        assert profile.level == profile.xp // 100 + 1
    assert profile.xp == 457


@pytest.mark.parametrize("points", [0, -5])
def test_non_positive_award_is_a_no_op(db_session, xp_service, student, points):
    assert xp_service.award(student.id, points, "nothing") is None
    assert db_session.query(StudentProfile).count() == 0
    assert db_session.query(XPEvent).count() == 0


def test_award_requires_reason(xp_service, student):
    with pytest.raises(ValidationError):
        xp_service.award(student.id, 10, "")


def test_get_profile_creates_defaults_once(db_session, xp_service, student):
    first = xp_service.get_profile(student.id)
    first_values = (first.level, first.xp, first.total_words_learned)
    second = xp_service.get_profile(student.id)

    assert first_values == (1, 0, 0)
    assert (second.level, second.xp, second.total_words_learned) == first_values
    assert db_session.query(StudentProfile).count() == 1


def test_concurrently_created_profile_is_reused(db_session, xp_service, student, monkeypatch):
    xp_service.award(student.id, 2, "mark_unknown_word")

    # 第一次查询时档案还不可见，插入会撞上唯一约束
    original = ProfileRepository.get_by_student
    missed = []

    def stale_get_by_student(self, student_id):
        if not missed:
            missed.append(student_id)
            return None
        return original(self, student_id)

    monkeypatch.setattr(ProfileRepository, "get_by_student", stale_get_by_student)
    xp_service.award(student.id, 2, "mark_unknown_word")

    assert missed == [student.id]
    profile = db_session.query(StudentProfile).one()
    assert (profile.xp, profile.level, profile.total_words_learned) == (4, 1, 0)
    assert db_session.query(XPEvent).count() == 2


def test_get_profile_for_unknown_student(xp_service):
    with pytest.raises(NotFoundError):
        xp_service.get_profile(9999)


def test_recent_events_newest_first(xp_service, student, clock):
    for points in [1, 2, 3, 4]:
        xp_service.award(student.id, points, f"reason-{points}")
        clock.advance(seconds=30)

    events = xp_service.recent_events(student.id, 3)
    assert [e.points for e in events] == [4, 3, 2]
    assert events[0].reason == "reason-4"


def test_recent_events_rejects_bad_limit(xp_service, student):
    with pytest.raises(ValidationError):
        xp_service.recent_events(student.id, 0)


def test_award_does_not_lose_concurrent_updates(db_session, session_factory, student, clock):
    """一个会话持有旧的档案对象时，另一个会话的加分不会被覆盖"""
    student_id = student.id
    # 内存库只有一个连接，先释放夹具会话占用的事务
    db_session.close()

    stale_session = session_factory(expire_on_commit=False)
    other_session = session_factory()
    try:
        stale_service = XPService(stale_session, clock)
        stale_profile = stale_service.get_profile(student_id)
        assert stale_profile.xp == 0

        XPService(other_session, clock).award(student_id, 10, "mark_known_word")

        stale_service.award(student_id, 10, "mark_known_word")
        assert stale_profile.xp == 20
        assert stale_profile.level == 1
    finally:
        stale_session.close()
        other_session.close()
