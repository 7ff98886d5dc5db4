import enum

# Enums

class TaskCategory(str, enum.Enum):
    INTERVIEWS = "Interviews"
    APPLICATIONS = "Applications"
    SPE = "SPE"
    STUDY = "Study"
    FITNESS = "Fitness"
    ERRANDS = "Errands"
    CONTENT = "Content"
    NETWORKING = "Networking"
    LEARNING = "Learning"
    DEFAULT = "Default"

class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class TaskMode(str, enum.Enum):
    FIXED = "fixed"
    RECURRING = "recurring"
    ONE_TIME = "one_time"

class Frequency(str, enum.Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"

class Weekday(str, enum.Enum):
    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"
    SU = "SU"

    @property
    def weekday_number(self) -> int:
        """Monday=0 ... Sunday=6, same as datetime.weekday()"""
        return list(Weekday).index(self)

class ConflictReason(str, enum.Enum):
    OUTSIDE_WINDOW = "OutsideWindow"
    NO_FREE_SLOT = "NoFreeSlot"
    INVALID_DURATION = "InvalidDuration"

class PlacementOrderPolicy(str, enum.Enum):
    AS_GIVEN = "as_given"
    FIXED_THEN_RECURRING_THEN_LONGEST = "fixed_then_recurring_then_longest"
