from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from datetime import datetime, time
from typing import Optional, List, Literal, Union, Annotated
import pytz

from .config import DEFAULT_TIMEZONE
from .models import TaskCategory, TaskPriority, TaskMode, Frequency, Weekday, ConflictReason, PlacementOrderPolicy
from .scheduling.core.constants import MIN_TASK_MINUTES, DEFAULT_RECURRENCE_COUNT

# ----------------- Time Window Schemas ---------------------

class WorkHours(BaseModel):
    start: time
    end: time

    @model_validator(mode="after")
    def check_order(self):
        if self.start >= self.end:
            raise ValueError(f"work hours must start before they end ({self.start} >= {self.end})")
        return self


class TimeWindow(BaseModel):
    start: datetime
    end: datetime
    work_hours: Optional[WorkHours] = Field(default=None, alias="workHours")
    timezone: str = Field(default_factory=lambda: DEFAULT_TIMEZONE)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"unknown timezone: {value}")
        return value

    @property
    def tz(self):
        return pytz.timezone(self.timezone)


class BusyInterval(BaseModel):
    start: datetime
    end: datetime
    label: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_order(self):
        if self.end <= self.start:
            raise ValueError(f"busy interval must end after it starts ({self.start} - {self.end})")
        return self

# ----------------- Task Schemas ---------------------

class RecurringPattern(BaseModel):
    freq: Frequency = Frequency.WEEKLY
    count: int = Field(default=DEFAULT_RECURRENCE_COUNT, gt=0)
    by_day: List[Weekday] = Field(default_factory=list, alias="byDay")
    start_week_offset: int = Field(default=0, ge=0, alias="startWeekOffset")
    start_time: Optional[time] = Field(default=None, alias="startTime")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("by_day")
    @classmethod
    def normalize_days(cls, value: List[Weekday]) -> List[Weekday]:
        # A set of weekdays, visited Monday first
        return sorted(set(value), key=lambda day: day.weekday_number)


class TaskBase(BaseModel):
    id: str
    title: str
    estimated_minutes: Optional[int] = Field(default=None, alias="estimatedMinutes")
    category: TaskCategory = TaskCategory.DEFAULT
    allow_parallel: bool = Field(default=False, alias="allowParallel")
    notes: Optional[str] = None
    priority: Optional[TaskPriority] = None

    model_config = ConfigDict(populate_by_name=True)

    @property
    def duration_minutes(self) -> Optional[int]:
        """Placeable duration, floored at MIN_TASK_MINUTES. None when missing or non-positive."""
        if self.estimated_minutes is None or self.estimated_minutes <= 0:
            return None
        return max(MIN_TASK_MINUTES, self.estimated_minutes)


class FixedStartTask(TaskBase):
    mode: Literal["fixed"] = TaskMode.FIXED.value
    fixed_start: datetime = Field(alias="fixedStart")


class RecurringTask(TaskBase):
    mode: Literal["recurring"] = TaskMode.RECURRING.value
    recurring: RecurringPattern


class OneTimeTask(TaskBase):
    mode: Literal["one_time"] = TaskMode.ONE_TIME.value


Task = Annotated[Union[FixedStartTask, RecurringTask, OneTimeTask], Field(discriminator="mode")]


class TaskIn(TaskBase):
    """Flat task payload as produced by task sources; converted to a Task variant before scheduling."""
    fixed_start: Optional[datetime] = Field(default=None, alias="fixedStart")
    recurring: Optional[RecurringPattern] = None

    def to_task(self) -> Union[FixedStartTask, RecurringTask, OneTimeTask]:
        common = self.model_dump(exclude={"fixed_start", "recurring"})
        if self.fixed_start is not None:
            return FixedStartTask(**common, fixed_start=self.fixed_start)
        if self.recurring is not None:
            return RecurringTask(**common, recurring=self.recurring)
        return OneTimeTask(**common)

# ----------------- Result Schemas ---------------------

class ScheduledEvent(BaseModel):
    id: str
    task_id: str
    title: str
    start: datetime
    end: datetime
    category: TaskCategory
    recurrence_descriptor: Optional[str] = None
    allow_parallel: bool = False
    notes: Optional[str] = None


class Conflict(BaseModel):
    subject_id: str
    task_id: str
    title: str
    reason: ConflictReason
    suggested_start: Optional[datetime] = None
    message: str = ""


class ScheduleResult(BaseModel):
    events: List[ScheduledEvent] = Field(default_factory=list)
    conflicts: List[Conflict] = Field(default_factory=list)

# ----------------- API Schemas ---------------------

class ScheduleRequest(BaseModel):
    tasks: List[TaskIn]
    window: TimeWindow
    busy: List[BusyInterval] = Field(default_factory=list)
    order_policy: Optional[PlacementOrderPolicy] = Field(default=None, alias="orderPolicy")

    model_config = ConfigDict(populate_by_name=True)
