from timetabler.models.constraint import Constraint  # noqa: F401
from timetabler.models.course import Course, SessionType  # noqa: F401
from timetabler.models.room import Room, RoomType  # noqa: F401
from timetabler.models.teacher import Teacher  # noqa: F401
