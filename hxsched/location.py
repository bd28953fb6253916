"""Locations holding resources, and the search for scheduling options."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .combinations import generate_all_valid_combinations
from .options import OptionSchedule, OptionsSchedule, ParamsCanRun
from .resource import ResourceInfo, ResourceScheduled, ResourcesPerType, ValidationError
from .task import Run


def _task_of(params: ParamsCanRun) -> Run:
    if params.task_run is None:
        raise ValueError("task run is required")
    return params.task_run


@dataclass(eq=False)
class Location:
    """A place with resources grouped by type."""

    name: str = ""
    resources: ResourcesPerType = field(default_factory=ResourcesPerType)
    id: int = 0
    location_offset: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def add_resource(self, resource: ResourceInfo) -> None:
        """Add an unbooked copy of ``resource`` under its resource type."""
        with self._lock:
            self.resources.setdefault(resource.resource_type, []).append(
                ResourceScheduled.from_info(resource)
            )

    def all_scheduling_options(self, params: ParamsCanRun) -> OptionsSchedule:
        """Every resource combination that can serve the run, per time slot."""
        task = _task_of(params)
        needed_per_type = task.needed_resources_per_type()
        needed_types = task.needed_resource_types()

        result = OptionsSchedule()
        for slot in params.time_interval.break_down(task.estimated_duration):
            available = ResourcesPerType()
            sufficient = True
            for resource_type in needed_types:
                free = [
                    resource
                    for resource in self.resources.get(resource_type, [])
                    if resource.is_available_in(slot)
                ]
                available[resource_type] = free
                if sum(r.served_quantity for r in free) < needed_per_type[resource_type]:
                    sufficient = False
                    break
            if not sufficient:
                continue

            for combination in generate_all_valid_combinations(
                available, needed_per_type, params.possibilities_up_to
            ):
                result.append(OptionSchedule(slot.time_start, combination))
        return result

    def one_scheduling_option(self, params: ParamsCanRun) -> OptionsSchedule:
        """One option per time slot, taking free resources in order.

        A slot that cannot supply a type keeps only the types gathered before it.
        """
        task = _task_of(params)
        needed_per_type = task.needed_resources_per_type()
        needed_types = task.needed_resource_types()

        result = OptionsSchedule()
        for slot in params.time_interval.break_down(task.estimated_duration):
            chosen = ResourcesPerType()
            for resource_type in needed_types:
                needed = needed_per_type[resource_type]
                picked: list[ResourceScheduled] = []
                quantity = 0
                for resource in self.resources.get(resource_type, []):
                    if not resource.is_available_in(slot):
                        continue
                    picked.append(resource)
                    quantity += resource.served_quantity
                    if quantity == needed:
                        break
                if quantity < needed:
                    break
                chosen[resource_type] = picked
            result.append(OptionSchedule(slot.time_start, chosen))
        return result


def new_location(name: str, location_id: int, location_offset: int = 0) -> Location:
    """Validate the parameters and create an empty location."""
    if not name:
        raise ValidationError("NewLocation: Name is required")
    if not location_id:
        raise ValidationError("NewLocation: ID is required")
    return Location(name=name, id=location_id, location_offset=location_offset)