"""Scheduling options produced for a run, and the parameters that request them."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from .interval import TimeInterval
from .resource import ResourcesPerType
from .task import Run, UnsupportedLoadUnitError


@dataclass
class ParamsCanRun:
    """Request for scheduling options of ``task_run`` within ``time_interval``.

    ``possibilities_up_to`` caps the number of options per slot when positive.
    """

    time_interval: TimeInterval
    task_run: Run | None = None
    possibilities_up_to: int = 0

    def __str__(self) -> str:
        interval = self.time_interval
        parts = [
            "ParamsCanRun{\n",
            "\tTimeInterval{\n",
            f"\t\tTimeStart: {interval.time_start},\n",
            f"\t\tTimeEnd: {interval.time_end},\n",
            f"\t\tSecondsOffset: {interval.seconds_offset},\n",
            "\t},\n",
        ]

        task = self.task_run
        if task is None:
            parts.append("\tTaskRun: nil,\n")
        else:
            parts.append("\tTaskRun: &Run{\n")
            parts.append(f"\t\tName: {json.dumps(task.name, ensure_ascii=False)},\n")
            if task.dependencies:
                parts.append("\t\tDependencies: []RunDependency{\n")
                for dep in task.dependencies:
                    parts.append("\t\t\t{\n")
                    parts.append(f"\t\t\t\tResourceType: {dep.resource_type},\n")
                    parts.append(f"\t\t\t\tResourceQuantity: {dep.resource_quantity},\n")
                    parts.append("\t\t\t},\n")
                parts.append("\t\t},\n")
            else:
                parts.append("\t\tDependencies: nil,\n")
            parts.append("\t\tRunLoad: {\n")
            parts.append(f"\t\t\tLoad: {task.run_load.load:f},\n")
            parts.append(f"\t\t\tLoadUnit: {task.run_load.load_unit},\n")
            parts.append("\t\t},\n")
            parts.append(f"\t\tID: {task.id},\n")
            parts.append(f"\t\tInitiatorID: {task.initiator_id},\n")
            parts.append(f"\t\tEstimatedDuration: {task.estimated_duration},\n")
            parts.append("\t},\n")

        parts.append("}")
        return "".join(parts)


@dataclass
class OptionSchedule:
    """One way to run a task: a start time and the resources to use."""

    when_can_start: int
    resources: ResourcesPerType = field(default_factory=ResourcesPerType)

    def cost_for(self, task: Run) -> float:
        """Total cost of running ``task`` on every resource of this option."""
        return sum(
            (task.cost_using(resource) for group in self.resources.values() for resource in group),
            0.0,
        )

    def describe(self, task: Run) -> str:
        """Readable summary of the option, including its cost for ``task``."""
        parts = [
            "\nOptionSchedule {",
            f"WhenCanStart: {self.when_can_start}, ",
            "Resources: ",
        ]
        resource_types = sorted(self.resources)
        last = len(resource_types) - 1
        for position, resource_type in enumerate(resource_types):
            parts.append(f"{resource_type}: [")
            parts.extend(str(resource) for resource in self.resources[resource_type])
            parts.append("]\n" if position == last else "],\n")
        parts.append("},\n")

        try:
            cost = self.cost_for(task)
        except UnsupportedLoadUnitError:
            cost = 0.0
        parts.append(f" cost: {cost:.2f}")
        parts.append("}")
        return "".join(parts)


class OptionsSchedule(list):
    """A list of scheduling options."""

    def describe(self, task: Run) -> str:
        """Numbered, one-line-per-option summary of the options."""
        lines = ["OptionsSchedule\n"]
        for number, option in enumerate(self, start=1):
            text = option.describe(task).replace("\n", "")
            lines.append(f"{number}: {text}\n")
        return "".join(lines)