"""Enumeration of resource selections that satisfy a run's needs."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from itertools import islice, product

from .resource import ResourceScheduled, ResourcesPerType
from .task import ResourceType


def _selections(
    resources: Sequence[ResourceScheduled], needed: int
) -> Iterator[list[ResourceScheduled]]:
    chosen: list[ResourceScheduled] = []

    def backtrack(start: int, remaining: int) -> Iterator[list[ResourceScheduled]]:
        if remaining == 0:
            yield list(chosen)
            return
        for position, resource in enumerate(resources[start:], start=start):
            if resource.served_quantity <= remaining:
                chosen.append(resource)
                yield from backtrack(position + 1, remaining - resource.served_quantity)
                chosen.pop()

    return backtrack(0, needed)


def generate_resource_combinations(
    resources: Sequence[ResourceScheduled],
    needed_quantity: int,
    max_combinations: int = 0,
) -> list[list[ResourceScheduled]]:
    """Subsets of ``resources`` whose served quantities add up to ``needed_quantity``.

    Subsets keep the order of ``resources``; at most ``max_combinations`` are
    returned when it is positive.
    """
    selections: Iterator[list[ResourceScheduled]] = _selections(resources, needed_quantity)
    if max_combinations > 0:
        selections = islice(selections, max_combinations)
    return list(selections)


def generate_all_valid_combinations(
    available: Mapping[ResourceType, Sequence[ResourceScheduled]],
    needed_per_type: Mapping[ResourceType, int],
    up_to: int = 0,
) -> list[ResourcesPerType]:
    """Every way to cover the needs of each available resource type.

    Types are taken in ascending order; at most ``up_to`` combinations are
    returned when it is positive.
    """
    resource_types = sorted(available)
    per_type = [
        generate_resource_combinations(available[rt], needed_per_type.get(rt, 0), up_to)
        for rt in resource_types
    ]

    combos: Iterator[tuple[list[ResourceScheduled], ...]] = product(*per_type)
    if up_to > 0:
        combos = islice(combos, up_to)

    return [
        ResourcesPerType((rt, list(selection)) for rt, selection in zip(resource_types, combo))
        for combo in combos
    ]