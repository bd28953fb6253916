# hxsched

A small library for planning runs against the resources of a location.

A **location** holds **resources** grouped by resource type. Every resource
keeps its own schedule of booked time intervals. A **run** states which
resource types it needs, how many of each, how long it takes and how much
load it brings. Given a time window, the library breaks the window into
slots as long as the run and reports which resources can serve each slot,
together with the cost of doing so.

## Installation

```
pip install hxsched
```

The package needs Python 3.10 or later and has no runtime dependencies.

## Concepts

- `hxsched.interval.TimeInterval(time_start, time_end, seconds_offset=0)`: a
  frozen span of time in seconds. `break_down(per_duration)` splits it into
  consecutive slots (the last one may be shorter; a non-positive duration gives
  no slots); `utc_start()` and `utc_end()` subtract the offset.
- `hxsched.task`: `RunDependency(resource_type, resource_quantity)`,
  `RunLoad(load, load_unit)` and `Run(name, dependencies, run_load, id,
  initiator_id, estimated_duration)`. `Run.cost_using(resource)` multiplies the
  load by the resource's price for the run's load unit and raises
  `UnsupportedLoadUnitError` when there is no such price.
  `needed_resource_types()` lists the distinct types in first-seen order;
  `needed_resources_per_type()` sums the quantities per type. `MAINTENANCE`
  (0) is the run id reserved for maintenance bookings.
- `hxsched.resource`: `ResourceInfo(name, cost_per_load_unit, id,
  resource_type, served_quantity)` describes a resource; `ResourceScheduled`
  adds a `schedule` of bookings.
  - `add_run(interval, run_id)` books an interval. It raises `ValidationError`
    when the start is not before the end or the id is not positive, and
    `ScheduleConflictError` when that exact interval is already booked.
  - `remove_run(run_id)` removes one booking of that run, raising `KeyError`
    if there is none.
  - `is_available_in(interval)` is true when that exact interval is not booked.
  - `format_schedule()` lists the bookings by start time.
  - `ResourceScheduled.from_info(info)` makes an unbooked resource.
- `new_resource(name, resource_type, cost_per_load_unit, resource_id=0)`
  builds a validated, unbooked resource and raises `ValidationError` for an
  empty name, a type below 1, a missing price table or a negative price.
- `ResourcesPerType`: a dict from resource type to resources, with
  `sorted_types()`.
- `hxsched.location`: `Location(name, resources, id, location_offset)` and
  `new_location(name, location_id, location_offset=0)`, which raises
  `ValidationError` for an empty name or a zero id. `add_resource(resource)`
  files an unbooked copy of a `ResourceInfo` under its type.

## Finding options

```python
from hxsched.interval import TimeInterval
from hxsched.task import Run, RunDependency, RunLoad
from hxsched.resource import ResourceInfo
from hxsched.location import new_location
from hxsched.options import ParamsCanRun

location = new_location("Workshop", 1)
location.add_resource(ResourceInfo(name="Bench", cost_per_load_unit={1: 2.0},
                                   id=1, resource_type=1, served_quantity=1))
location.add_resource(ResourceInfo(name="Tool", cost_per_load_unit={1: 1.0},
                                   id=2, resource_type=2, served_quantity=1))

run = Run(
    name="assembly",
    dependencies=[RunDependency(1, 1), RunDependency(2, 1)],
    run_load=RunLoad(load=1, load_unit=1),
    id=1,
    estimated_duration=1800,
)

params = ParamsCanRun(time_interval=TimeInterval(10000, 10000 + 7200), task_run=run)

# One option per slot: the first free resources that cover the need.
options = location.one_scheduling_option(params)

# Every combination per slot, capped by possibilities_up_to.
params.possibilities_up_to = 2
all_options = location.all_scheduling_options(params)

print(all_options.describe(run))
for option in all_options:
    print(option.when_can_start, option.cost_for(run))
```

Both searches raise `ValueError` when `task_run` is `None`.

`one_scheduling_option` returns one `OptionSchedule` for every slot of the
window. Free resources of each type are taken in order until their served
quantity reaches the need; if a type cannot be covered, the option for that
slot keeps only the types gathered before it.

`all_scheduling_options` skips slots whose free resources cannot cover the
need and lists every combination whose served quantities meet each need
exactly, at most `possibilities_up_to` per slot when that is above zero.

The results are `OptionsSchedule` lists. `OptionSchedule.cost_for(run)` sums
the run's cost over every resource of the option, and `describe(run)` gives a
readable summary; `OptionsSchedule.describe(run)` numbers them one per line.
`str(ParamsCanRun)` shows the request in full.

The combination search is also available on its own in
`hxsched.combinations` through `generate_resource_combinations(resources,
needed_quantity, max_combinations=0)` and
`generate_all_valid_combinations(available, needed_per_type, up_to=0)`.

## What it does not do

- Bookings are matched by exact interval only; overlapping but different
  intervals are not treated as conflicts.
- Finding options does not book anything; call `add_run` yourself.
- `Location.location_offset` is stored but not used in any calculation.
- There is no command-line tool and no storage: schedules live in memory.

## Running the tests

```
pip install -e ".[test]"
pytest
```