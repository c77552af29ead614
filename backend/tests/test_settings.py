import pytest
from pydantic import ValidationError

from timetabler.core.config import DEFAULT_BREAK_SLOTS, DEFAULT_DAYS, Settings


def test_defaults(settings):
    assert settings.api_prefix == "/api"
    assert settings.schedule_days == DEFAULT_DAYS
    assert settings.schedule_break_slots == DEFAULT_BREAK_SLOTS
    assert len(settings.schedule_time_slots) == 9
    assert settings.teacher_daily_cap == 2
    assert (settings.conflict_penalty, settings.constraint_violation_penalty) == (10, 5)


def test_list_values_accept_comma_strings():
    settings = Settings(_env_file=None, schedule_days="Mon, Tue ,Wed", cors_origins='["http://a", " http://b "]')
    assert settings.schedule_days == ["Mon", "Tue", "Wed"]
    assert settings.cors_origins == ["http://a", "http://b"]


def test_rejects_invalid_limits():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, teacher_daily_cap=0)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, conflict_penalty=-1)
