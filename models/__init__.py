from models.ranged import BoundedInt, Hour, Minute, MinuteOfDay, Iteration
from models.week import Week, ActiveDay
from models.period import PeriodOfDay
from models.timeslot import TimeSlot
from models.subject import Subject
from models.school_class import SchoolClass
from models.location import (
    FearnhillClassroom,
    FearnhillRoom,
    FearnhillSection,
    HighfieldBlock,
    HighfieldClassroom,
    HighfieldRoom,
    Location,
)
from models.activity import Activity, ActivityKind
from models.timetable import Timetable

__all__ = [
    "BoundedInt",
    "Hour",
    "Minute",
    "MinuteOfDay",
    "Iteration",
    "Week",
    "ActiveDay",
    "PeriodOfDay",
    "TimeSlot",
    "Subject",
    "SchoolClass",
    "Location",
    "HighfieldBlock",
    "HighfieldRoom",
    "HighfieldClassroom",
    "FearnhillSection",
    "FearnhillRoom",
    "FearnhillClassroom",
    "Activity",
    "ActivityKind",
    "Timetable",
]
