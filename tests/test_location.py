import pytest

from hxsched.interval import TimeInterval
from hxsched.location import Location, new_location
from hxsched.options import ParamsCanRun
from hxsched.resource import ResourceInfo, ResourceScheduled, ResourcesPerType, ValidationError
from hxsched.task import MAINTENANCE, Run, RunDependency, RunLoad

NOW = 10000
HALF_HOUR = 1800
ONE_HOUR = 3600
ONE_DAY = 86400


def _resource(resource_id, resource_type, cost, busy):
    return ResourceScheduled(
        name=f"Resource {resource_id}",
        cost_per_load_unit={1: cost},
        id=resource_id,
        resource_type=resource_type,
        served_quantity=1,
        schedule={TimeInterval(start, start + HALF_HOUR): MAINTENANCE for start in busy},
    )


@pytest.fixture
def location():
    return Location(
        id=1,
        name="test",
        resources=ResourcesPerType(
            {
                1: [
                    _resource(1, 1, 2.0, [NOW, NOW + ONE_HOUR]),
                    _resource(2, 1, 3.0, [NOW + ONE_HOUR]),
                    _resource(3, 1, 2.0, [NOW]),
                ],
                2: [_resource(4, 2, 1.0, [])],
            }
        ),
    )


@pytest.fixture
def task_run():
    return Run(
        id=1,
        estimated_duration=HALF_HOUR,
        dependencies=[RunDependency(1, 1), RunDependency(2, 1)],
        run_load=RunLoad(load=1, load_unit=1),
    )


def test_all_options_per_time_interval(location, task_run):
    options = location.all_scheduling_options(
        ParamsCanRun(TimeInterval(NOW, NOW + 2 * ONE_HOUR), task_run, 2)
    )
    assert len(options) == 6
    assert options[0].resources
    assert [o.when_can_start for o in options] == [
        NOW,
        NOW + HALF_HOUR,
        NOW + HALF_HOUR,
        NOW + ONE_HOUR,
        NOW + ONE_HOUR + HALF_HOUR,
        NOW + ONE_HOUR + HALF_HOUR,
    ]
    assert [r.id for r in options[0].resources[1]] == [2]
    assert [r.id for r in options[3].resources[1]] == [3]
    assert options.describe(task_run).startswith("OptionsSchedule\n1: ")


def test_all_options_uncapped(location, task_run):
    options = location.all_scheduling_options(
        ParamsCanRun(TimeInterval(NOW, NOW + 2 * ONE_HOUR), task_run)
    )
    assert len(options) == 1 + 3 + 1 + 3


def test_all_options_skips_slots_without_enough(location):
    task = Run(
        id=1,
        estimated_duration=HALF_HOUR,
        dependencies=[RunDependency(1, 3)],
        run_load=RunLoad(load=1, load_unit=1),
    )
    options = location.all_scheduling_options(
        ParamsCanRun(TimeInterval(NOW, NOW + 2 * ONE_HOUR), task)
    )
    assert [o.when_can_start for o in options] == [NOW + HALF_HOUR, NOW + ONE_HOUR + HALF_HOUR]
    for option in options:
        assert len(option.resources[1]) == 3


def test_one_option_per_time_interval(location, task_run):
    options = location.one_scheduling_option(
        ParamsCanRun(TimeInterval(NOW, NOW + 2 * ONE_HOUR), task_run)
    )
    assert len(options) == 4
    assert options[0].resources
    assert [r.id for r in options[0].resources[1]] == [2]
    assert [r.id for r in options[1].resources[1]] == [1]
    assert [r.id for r in options[2].resources[1]] == [3]
    for option in options:
        assert [r.id for r in option.resources[2]] == [4]


def test_one_option_keeps_partial_slot(location):
    task = Run(
        estimated_duration=HALF_HOUR,
        dependencies=[RunDependency(2, 1), RunDependency(1, 2)],
        run_load=RunLoad(load=1, load_unit=1),
    )
    options = location.one_scheduling_option(ParamsCanRun(TimeInterval(NOW, NOW + HALF_HOUR), task))
    assert len(options) == 1
    assert list(options[0].resources) == [2]


def test_booking_removes_option(location, task_run):
    location.resources[2][0].add_run(TimeInterval(NOW, NOW + HALF_HOUR), 7)
    options = location.all_scheduling_options(
        ParamsCanRun(TimeInterval(NOW, NOW + ONE_HOUR), task_run)
    )
    assert all(o.when_can_start != NOW for o in options)


def test_missing_task_raises(location):
    with pytest.raises(ValueError):
        location.all_scheduling_options(ParamsCanRun(TimeInterval(NOW, NOW + ONE_DAY)))
    with pytest.raises(ValueError):
        location.one_scheduling_option(ParamsCanRun(TimeInterval(NOW, NOW + ONE_DAY)))


def test_new_location():
    loc = new_location("Depot", 3, ONE_HOUR)
    assert (loc.name, loc.id, loc.location_offset) == ("Depot", 3, ONE_HOUR)
    assert dict(loc.resources) == {}


@pytest.mark.parametrize("name, location_id", [("", 1), ("Depot", 0)])
def test_new_location_validation(name, location_id):
    with pytest.raises(ValidationError):
        new_location(name, location_id)


def test_add_resource_groups_by_type():
    loc = new_location("Depot", 1)
    info = ResourceInfo(name="Room", cost_per_load_unit={1: 1.0}, id=5, resource_type=2, served_quantity=1)
    loc.add_resource(info)
    loc.add_resource(info)
    assert list(loc.resources) == [2]
    added = loc.resources[2]
    assert len(added) == 2
    assert added[0] is not added[1]
    assert added[0].id == 5
    assert added[0].schedule == {}
    assert added[0].is_available_in(TimeInterval(NOW, NOW + HALF_HOUR))