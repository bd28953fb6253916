"""Schedulable resources and their per-type grouping."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from typing import Mapping

from .interval import TimeInterval
from .task import ResourceType, RunID


class ValidationError(ValueError):
    """Input to a resource operation is invalid."""


class ScheduleConflictError(ValueError):
    """A time interval is already booked on a resource."""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass
class ResourceInfo:
    """Static description of a resource."""

    name: str = ""
    cost_per_load_unit: dict[int, float] = field(default_factory=dict)
    id: int = 0
    resource_type: ResourceType = 0
    served_quantity: int = 0

    def __str__(self) -> str:
        return f"ID: {self.id},Name: {_quote(self.name)},ResourceType: {self.resource_type}"


@dataclass(eq=False)
class ResourceScheduled(ResourceInfo):
    """A resource together with its booked time intervals."""

    schedule: dict[TimeInterval, RunID] = field(default_factory=dict)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    @classmethod
    def from_info(cls, info: ResourceInfo) -> ResourceScheduled:
        """Create an unbooked resource from a resource description."""
        return cls(
            name=info.name,
            cost_per_load_unit=info.cost_per_load_unit,
            id=info.id,
            resource_type=info.resource_type,
            served_quantity=info.served_quantity,
        )

    def format_schedule(self) -> str:
        """Human-readable listing of bookings, ordered by start time."""
        with self._lock:
            entries = sorted(
                self.schedule.items(),
                key=lambda item: (item[0].time_start, item[0].time_end),
            )
        if not entries:
            return "Schedule: (empty)"

        lines = ["Schedule:\n"]
        for interval, run_id in entries:
            lines.append(
                f"- [{interval.time_start}-{interval.time_end}] "
                f"(UTC {interval.utc_start()}-{interval.utc_end()}) "
                f"Offset {interval.seconds_offset / 3600:.1f}h → Task {run_id}\n"
            )
        return "".join(lines)

    def add_run(self, interval: TimeInterval, run_id: RunID) -> None:
        """Book ``interval`` for run ``run_id``.

        Run identifier 0 is reserved for maintenance and is rejected.
        """
        if interval.time_start >= interval.time_end:
            raise ValidationError(
                f"TimeEnd {interval.time_end}: time start greater or equal to time end"
            )
        if run_id <= 0:
            raise ValidationError(f"ID {run_id}: must be positive")

        with self._lock:
            if interval in self.schedule:
                raise ScheduleConflictError(f"time interval {interval} already scheduled")
            self.schedule[interval] = run_id

    def remove_run(self, run_id: RunID) -> None:
        """Remove one booking held by ``run_id``."""
        with self._lock:
            for interval, booked in self.schedule.items():
                if booked == run_id:
                    del self.schedule[interval]
                    return
        raise KeyError(f"run {run_id} not found in schedule")

    def is_available_in(self, interval: TimeInterval) -> bool:
        """Whether ``interval`` is not yet booked on this resource."""
        with self._lock:
            return interval not in self.schedule


class ResourcesPerType(dict):
    """Mapping of resource type to the scheduled resources of that type."""

    def sorted_types(self) -> list[ResourceType]:
        """Resource types present, in ascending order."""
        return sorted(self)

    def __str__(self) -> str:
        parts = ["ResourcesPerType{\n"]
        for resource_type in self.sorted_types():
            parts.append(f"\t{resource_type}: []*Resource{{\n")
            for resource in self[resource_type]:
                if resource is None:
                    parts.append("\t\tnil,\n")
                else:
                    text = str(resource).replace("\n", "\n\t\t")
                    parts.append(f"\t\t{text},\n")
            parts.append("\t},\n")
        parts.append("}")
        return "".join(parts)


def new_resource(
    name: str,
    resource_type: ResourceType,
    cost_per_load_unit: Mapping[int, float] | None,
    resource_id: int = 0,
) -> ResourceScheduled:
    """Validate the parameters and create an unbooked resource."""
    if not name:
        raise ValidationError("Name is required")
    if resource_type <= 0:
        raise ValidationError("ResourceType must be positive")
    if cost_per_load_unit is None:
        raise ValidationError("CostPerLoadUnit is required")
    if any(cost < 0 for cost in cost_per_load_unit.values()):
        raise ValidationError("CostPerLoadUnit must not be negative")

    return ResourceScheduled(
        name=name,
        cost_per_load_unit=dict(cost_per_load_unit),
        id=resource_id,
        resource_type=resource_type,
    )