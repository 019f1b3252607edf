import random

import pytest

from algoworks.jobs import (
    MAX_RUNTIME,
    MIN_RUNTIME,
    Job,
    JobSystem,
    load_jobs,
    parse_jobs,
)


def test_parse_skips_header_and_bad_lines():
    lines = ["ID CLASS PRIORITY", "X1 A 3", "garbage", "X2 B notanumber", "X3 C 7"]
    jobs = parse_jobs(lines, random.Random(1))
    assert [(j.job_id, j.job_class, j.priority) for j in jobs] == [
        ("X1", "A", 3),
        ("X3", "C", 7),
    ]


def test_parse_runtimes_in_range():
    lines = ["header"] + [f"J{i} A {i}" for i in range(50)]
    jobs = parse_jobs(lines, random.Random(7))
    assert len(jobs) == 50
    assert all(MIN_RUNTIME <= j.runtime <= MAX_RUNTIME for j in jobs)
    assert all(j.start_time is None and j.end_time is None for j in jobs)


def test_parse_only_header_gives_nothing():
    assert parse_jobs(["X1 A 3"], random.Random(0)) == []


def test_load_jobs_reads_file(tmp_path):
    path = tmp_path / "jobs.txt"
    path.write_text("id class prio\nK1 L 4\nK2 Z 9\n", encoding="utf-8")
    jobs = load_jobs(str(path), random.Random(3))
    assert [j.job_id for j in jobs] == ["K1", "K2"]
    assert [j.priority for j in jobs] == [4, 9]


def test_load_jobs_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_jobs(str(tmp_path / "absent.txt"), random.Random(0))


def test_reset_times():
    job = Job("X", "A", 1, 5.0, start_time=1.0, end_time=6.0, elapsed_time=5.0)
    job.reset_times()
    assert (job.start_time, job.end_time, job.elapsed_time) == (None, None, None)
    assert job.runtime == 5.0


def test_new_job_ids_are_sequential():
    system = JobSystem(rng=random.Random(2))
    first = system.new_job("A", 5)
    second = system.new_job("B", 1)
    assert first.job_id == "J001"
    assert second.job_id == "J002"
    assert MIN_RUNTIME <= first.runtime <= MAX_RUNTIME


def test_new_job_continues_after_file_jobs():
    system = JobSystem(next_id=4)
    assert system.new_job("A", 2).job_id == "J004"


@pytest.mark.parametrize("priority", [0, -3])
def test_new_job_rejects_non_positive_priority(priority):
    system = JobSystem()
    with pytest.raises(ValueError):
        system.new_job("A", priority)


def test_new_job_rejects_long_class():
    with pytest.raises(ValueError):
        JobSystem().new_job("AB", 1)


def test_move_to_class_queues_orders_by_priority():
    system = JobSystem()
    low = Job("L", "A", 1, 2.0)
    high = Job("H", "A", 9, 2.0)
    mid = Job("M", "A", 5, 2.0)
    for job in (low, high, mid):
        system.add_job(job)
    moved = system.move_to_class_queues()
    assert moved == [low, high, mid]
    assert system.queued("A") == [high, mid, low]
    assert system.move_to_class_queues() == []


def test_step_dispatches_highest_priority_first():
    system = JobSystem({"B": 1}, tick=0.5)
    system.add_job(Job("low", "B", 1, 1.0))
    system.add_job(Job("high", "B", 8, 1.0))
    system.move_to_class_queues()
    report = system.step()
    assert [(job.job_id, slot) for job, slot in report.dispatched] == [("high", "B0")]
    assert report.completed == ()
    assert system.busy


def test_two_slots_run_in_parallel():
    system = JobSystem({"A": 2}, tick=0.5)
    system.add_job(Job("a", "A", 1, 1.0))
    system.add_job(Job("b", "A", 1, 1.0))
    system.move_to_class_queues()
    report = system.step()
    assert sorted(slot for _, slot in report.dispatched) == ["A0", "A1"]


def test_drain_completes_jobs_with_consistent_times():
    system = JobSystem({"B": 1}, tick=0.5)
    first = Job("first", "B", 5, 1.0)
    second = Job("second", "B", 1, 1.5)
    system.add_job(first)
    system.add_job(second)
    done = system.drain()
    assert done == [first, second]
    assert system.completed == [first, second]
    for job in done:
        assert job.end_time - job.start_time == pytest.approx(job.runtime)
        assert job.elapsed_time == pytest.approx(job.runtime)
    assert second.start_time >= first.end_time
    assert not system.busy


def test_drain_leaves_jobs_without_processor():
    system = JobSystem({"A": 1}, tick=0.5)
    orphan = Job("o", "Q", 3, 1.0)
    runnable = Job("r", "A", 3, 1.0)
    system.add_job(orphan)
    system.add_job(runnable)
    assert system.drain() == [runnable]
    assert system.queued("Q") == [orphan]


def test_zero_runtime_completes_in_same_step():
    system = JobSystem({"C": 1})
    job = Job("z", "C", 1, 0.0)
    system.add_job(job)
    system.move_to_class_queues()
    report = system.step()
    assert report.completed == (job,)
    assert job.elapsed_time == 0.0


def test_clock_advances_per_step():
    system = JobSystem({"A": 1}, tick=0.5)
    times = [system.step().time for _ in range(3)]
    assert times == [0.0, 0.5, 1.0]


def test_invalid_configuration():
    with pytest.raises(ValueError):
        JobSystem({"A": -1})
    with pytest.raises(ValueError):
        JobSystem(tick=0)