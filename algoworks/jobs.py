"""Priority job scheduling over per-class processor pools, simulated in ticks."""

from __future__ import annotations

import argparse
import heapq
import itertools
import random
import re
import sys
import threading
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

DEFAULT_FILE = "jobs.txt"
DEFAULT_PROCESSORS: dict[str, int] = {"A": 2, "B": 1, "C": 1, "D": 1, "L": 1, "Z": 1}
DEFAULT_TICK = 0.1
MIN_RUNTIME = 15
MAX_RUNTIME = 25

_LINE = re.compile(r"\s*(\S+)\s+(\S)\s*([+-]?\d+)")


def _random_runtime(rng: random.Random) -> float:
    return float(MIN_RUNTIME + rng.randrange(MAX_RUNTIME - MIN_RUNTIME + 1))


def _fmt(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{round(value, 6):g}"


@dataclass
class Job:
    """A unit of work belonging to a processor class, with its timing record."""

    job_id: str
    job_class: str
    priority: int
    runtime: float = 0.0
    start_time: float | None = None
    end_time: float | None = None
    elapsed_time: float | None = None

    def reset_times(self) -> None:
        """Forget when the job started and finished."""
        self.start_time = None
        self.end_time = None
        self.elapsed_time = None


def parse_jobs(lines: Iterable[str], rng: random.Random) -> list[Job]:
    """Read jobs from ``id class priority`` lines after a header line.

    Lines that do not hold an id, a one-letter class and an integer priority are
    skipped. Each job gets a random runtime of 15 to 25 seconds.
    """
    rows = iter(lines)
    next(rows, None)
    jobs = []
    for line in rows:
        found = _LINE.match(line)
        if found is None:
            continue
        job_id, job_class, priority = found.groups()
        jobs.append(Job(job_id, job_class, int(priority), _random_runtime(rng)))
    return jobs


def load_jobs(path: str, rng: random.Random) -> list[Job]:
    """Read jobs from a text file; see :func:`parse_jobs`."""
    with open(path, encoding="utf-8") as handle:
        return parse_jobs(handle, rng)


@dataclass(frozen=True)
class StepReport:
    """What happened during one simulation tick."""

    time: float
    dispatched: tuple[tuple[Job, str], ...] = ()
    completed: tuple[Job, ...] = field(default=())


class JobSystem:
    """An input queue, per-class priority queues and processor slots, advanced tick by tick."""

    def __init__(
        self,
        processors: Mapping[str, int] | None = None,
        *,
        rng: random.Random | None = None,
        tick: float = DEFAULT_TICK,
        next_id: int = 1,
    ) -> None:
        counts = dict(DEFAULT_PROCESSORS if processors is None else processors)
        if any(count < 0 for count in counts.values()):
            raise ValueError("processor counts must not be negative")
        if tick <= 0:
            raise ValueError("tick must be positive")
        self.processors = counts
        self.tick = tick
        self.completed: list[Job] = []
        self._slots: dict[str, list[Job | None]] = {
            cls: [None] * count for cls, count in counts.items()
        }
        self._input: deque[Job] = deque()
        self._class_queues: dict[str, list[tuple[int, int, Job]]] = {}
        self._order = itertools.count()
        self._rng = rng if rng is not None else random.Random()
        self._next_id = next_id
        self._ticks = 0
        self._lock = threading.RLock()

    @property
    def current_time(self) -> float:
        return round(self._ticks * self.tick, 9)

    @property
    def busy(self) -> bool:
        """True while any processor slot holds a job."""
        with self._lock:
            return any(job is not None for slots in self._slots.values() for job in slots)

    def queued(self, job_class: str) -> list[Job]:
        """Jobs waiting in a class queue, highest priority first."""
        with self._lock:
            return [job for _, _, job in sorted(self._class_queues.get(job_class, []))]

    def add_job(self, job: Job) -> None:
        """Place a job on the input queue."""
        with self._lock:
            self._input.append(job)

    def new_job(self, job_class: str, priority: int) -> Job:
        """Create a job with the next sequential id and a random runtime, and queue it."""
        if len(job_class) != 1:
            raise ValueError("job class must be a single character")
        if priority <= 0:
            raise ValueError("priority must be positive")
        with self._lock:
            job = Job(f"J{self._next_id:03d}", job_class, priority, _random_runtime(self._rng))
            self._next_id += 1
            self._input.append(job)
        return job

    def move_to_class_queues(self) -> list[Job]:
        """Move every job on the input queue to its class queue; return the jobs moved."""
        moved = []
        with self._lock:
            while self._input:
                job = self._input.popleft()
                queue = self._class_queues.setdefault(job.job_class, [])
                heapq.heappush(queue, (-job.priority, next(self._order), job))
                moved.append(job)
        return moved

    def _has_work(self) -> bool:
        return self.busy or any(self._class_queues.get(cls) for cls in self._slots)

    def step(self) -> StepReport:
        """Fill idle processors, retire finished jobs, then advance the clock one tick."""
        with self._lock:
            now = self.current_time
            dispatched = []
            for cls, slots in self._slots.items():
                queue = self._class_queues.get(cls)
                for index, occupant in enumerate(slots):
                    if occupant is None and queue:
                        _, _, job = heapq.heappop(queue)
                        job.start_time = now
                        job.end_time = now + job.runtime
                        slots[index] = job
                        dispatched.append((job, f"{cls}{index}"))
            finished = []
            for slots in self._slots.values():
                for index, job in enumerate(slots):
                    if job is not None and job.end_time is not None and job.end_time <= now:
                        job.elapsed_time = job.end_time - job.start_time
                        self.completed.append(job)
                        finished.append(job)
                        slots[index] = None
            self._ticks += 1
            return StepReport(now, tuple(dispatched), tuple(finished))

    def drain(self) -> list[Job]:
        """Run until no runnable job is waiting or running; return the jobs completed."""
        done: list[Job] = []
        with self._lock:
            while True:
                self.move_to_class_queues()
                if not self._has_work():
                    return done
                done.extend(self.step().completed)


def _describe(job: Job) -> str:
    return (
        f"Job ID: {job.job_id} | Class: {job.job_class} | Priority: {job.priority}"
        f" | Runtime: {_fmt(job.runtime)} seconds"
    )


def _print_report(moved: Sequence[Job], report: StepReport) -> None:
    for job in moved:
        print(f"Moved job {job.job_id} to class queue {job.job_class}")
    for job, slot in report.dispatched:
        print(f"Dispatching job: {job.job_id} | Class: {job.job_class} to Processor {slot}")
    for job in report.completed:
        print(
            f"Completed job: {job.job_id} | Start Time: {_fmt(job.start_time)}"
            f" | End Time: {_fmt(job.end_time)} | Runtime: {_fmt(job.runtime)}s"
        )


def _run_worker(system: JobSystem, stop: threading.Event) -> None:
    while not stop.is_set():
        moved = system.move_to_class_queues()
        _print_report(moved, system.step())
        stop.wait(system.tick)


def _read_jobs(system: JobSystem) -> None:
    while True:
        try:
            entry = input("Enter job class (A-Z) or 'Q' to quit adding jobs: ").strip()
        except EOFError:
            return
        if not entry:
            continue
        job_class = entry[0]
        if job_class in "Qq":
            return
        try:
            priority = int(input("Enter job priority (higher value = higher priority): "))
            job = system.new_job(job_class, priority)
        except EOFError:
            return
        except ValueError:
            print("Invalid input. Try again.", file=sys.stderr)
            continue
        print(f"Added new job: {job.job_id} | Class: {job.job_class} | Priority: {job.priority}")


def main(argv: Sequence[str] | None = None) -> int:
    """Load jobs, accept more interactively while the scheduler runs, then report."""
    parser = argparse.ArgumentParser(description="Priority job scheduler simulation")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        jobs = load_jobs(args.file, rng)
    except OSError:
        print(f"Error: Cannot open file {args.file}", file=sys.stderr)
        jobs = []

    print("Jobs read from file:")
    for job in jobs:
        print(_describe(job))

    system = JobSystem(rng=rng, next_id=len(jobs) + 1)
    for job in jobs:
        system.add_job(job)

    stop = threading.Event()
    worker = threading.Thread(target=_run_worker, args=(system, stop), daemon=True)
    worker.start()
    try:
        _read_jobs(system)
    finally:
        stop.set()
        worker.join()

    print("\nOutput Queue Jobs:")
    for job in system.completed:
        print(
            f"Job ID: {job.job_id} | Class: {job.job_class}"
            f" | Start Time: {_fmt(job.start_time)} | End Time: {_fmt(job.end_time)}"
            f" | Elapsed Time: {job.elapsed_time:.1f} seconds"
        )
    print("System shutting down...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())