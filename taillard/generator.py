"""Reproduction of the Taillard flow shop benchmark instances ta001-ta120."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from taillard.lcg import UnifGenerator
from taillard.models import ProcessingTimes, TaillardInstance
from taillard.seeds import FIRST_ID, LAST_ID, get_time_seed, validate_instance_id

logger = logging.getLogger("taillard")

LOW_TIME = 1
HIGH_TIME = 99


def get_job_count(instance_id: int) -> int:
    instance_id = validate_instance_id(instance_id)
    if instance_id > 110:
        return 500
    if instance_id > 90:
        return 200
    if instance_id > 60:
        return 100
    if instance_id > 30:
        return 50
    return 20


def get_machine_count(instance_id: int) -> int:
    instance_id = validate_instance_id(instance_id)
    if instance_id > 110:
        return 20  # 500x20
    if instance_id > 100:
        return 20  # 200x20
    if instance_id > 90:
        return 10  # 200x10
    if instance_id > 80:
        return 20  # 100x20
    if instance_id > 70:
        return 10  # 100x10
    if instance_id > 60:
        return 5  # 100x5
    if instance_id > 50:
        return 20  # 50x20
    if instance_id > 40:
        return 10  # 50x10
    if instance_id > 30:
        return 5  # 50x5
    if instance_id > 20:
        return 20  # 20x20
    if instance_id > 10:
        return 10  # 20x10
    return 5  # 20x5


def generate_matrix(jobs: int, machines: int, time_seed: int) -> ProcessingTimes:
    """Draw a Taillard-style flow shop processing-time matrix.

    Cells are filled machine by machine, and within a machine job by job,
    one draw from ``time_seed``'s stream per cell. That order fixes which
    stream value lands in which cell.

    Args:
        jobs: Number of jobs (columns).
        machines: Number of machines (rows).
        time_seed: Initial state of the generator.

    Returns:
        Fresh ``machines x jobs`` nested list with values in [1, 99].

    Raises:
        ValueError: If ``jobs`` or ``machines`` is not positive.
        InvalidSeedError: If ``time_seed`` cannot drive the generator.
    """
    if jobs <= 0 or machines <= 0:
        raise ValueError(f"jobs and machines must be positive, got {jobs}x{machines}")
    gen = UnifGenerator(time_seed)
    flat = gen.draws(jobs * machines, LOW_TIME, HIGH_TIME)
    return [flat[i * jobs : (i + 1) * jobs] for i in range(machines)]


def generate_processing_times(instance_id: int) -> ProcessingTimes:
    """Processing times of instance ``instance_id`` as a machines x jobs matrix."""
    jobs = get_job_count(instance_id)
    machines = get_machine_count(instance_id)
    time_seed = get_time_seed(instance_id)
    logger.debug(
        "Generating ta%03d jobs=%d machines=%d seed=%d", instance_id, jobs, machines, time_seed
    )
    return generate_matrix(jobs, machines, time_seed)


def generate_instance(instance_id: int) -> tuple[int, int, ProcessingTimes]:
    """Return ``(jobs, machines, processing_times)`` of one instance."""
    return (
        get_job_count(instance_id),
        get_machine_count(instance_id),
        generate_processing_times(instance_id),
    )


def build_instance(instance_id: int) -> TaillardInstance:
    jobs, machines, processing_times = generate_instance(instance_id)
    return TaillardInstance(
        instance_id=instance_id,
        jobs_number=jobs,
        machines_number=machines,
        time_seed=get_time_seed(instance_id),
        processing_times=processing_times,
    )


def iter_instance_ids(
    jobs: Optional[int] = None, machines: Optional[int] = None
) -> Iterator[int]:
    """Yield instance ids in ascending order, optionally one size class only.

    >>> list(iter_instance_ids(jobs=50, machines=10))
    [41, 42, 43, 44, 45, 46, 47, 48, 49, 50]
    """
    for instance_id in range(FIRST_ID, LAST_ID + 1):
        if jobs is not None and get_job_count(instance_id) != jobs:
            continue
        if machines is not None and get_machine_count(instance_id) != machines:
            continue
        yield instance_id
