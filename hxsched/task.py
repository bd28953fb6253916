"""Runs (tasks) and the resources they depend on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol

ResourceType = int
RunID = int

MAINTENANCE: RunID = 0
"""Run identifier reserved for maintenance slots."""


class UnsupportedLoadUnitError(LookupError):
    """A resource has no cost defined for the load unit of a run."""

    def __init__(self, load_unit: int) -> None:
        super().__init__(f"resource does not support load unit {load_unit}")
        self.load_unit = load_unit


class _Priced(Protocol):
    cost_per_load_unit: Mapping[int, float]


@dataclass(frozen=True)
class RunDependency:
    """A number of resources of one type that a run needs."""

    resource_type: ResourceType
    resource_quantity: int


@dataclass(frozen=True)
class RunLoad:
    """Amount of work in a run, measured in a load unit."""

    load: float = 0.0
    load_unit: int = 0


@dataclass
class Run:
    """A unit of work to be scheduled on resources."""

    name: str = ""
    dependencies: list[RunDependency] = field(default_factory=list)
    run_load: RunLoad = field(default_factory=RunLoad)
    id: RunID = 0
    initiator_id: int = 0
    estimated_duration: int = 0

    def cost_using(self, resource: _Priced) -> float:
        """Cost of this run on ``resource``, given its price per load unit."""
        unit = self.run_load.load_unit
        try:
            cost_per_unit = resource.cost_per_load_unit[unit]
        except KeyError:
            raise UnsupportedLoadUnitError(unit) from None
        return self.run_load.load * cost_per_unit

    def needed_resource_types(self) -> list[ResourceType]:
        """Distinct resource types this run depends on, in first-seen order."""
        return list(dict.fromkeys(dep.resource_type for dep in self.dependencies))

    def needed_resources_per_type(self) -> dict[ResourceType, int]:
        """Total quantity needed for each resource type."""
        needed: dict[ResourceType, int] = {}
        for dep in self.dependencies:
            needed[dep.resource_type] = needed.get(dep.resource_type, 0) + dep.resource_quantity
        return needed