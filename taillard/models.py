"""Core data structures for generated Taillard flow shop instances.

This module defines:
    ProcessingTimes  -- alias for the machines x jobs integer matrix.
    TaillardInstance -- immutable container for one generated instance.
"""

from dataclasses import dataclass

ProcessingTimes = list[list[int]]  # processing_times[machine][job]


@dataclass(frozen=True)
class TaillardInstance:
    """Immutable representation of a Taillard flow shop instance.

    Attributes:
        instance_id: Benchmark number, 1..120.
        jobs_number: Number of jobs (N).
        machines_number: Number of machines (M).
        time_seed: Published seed the processing times were drawn from.
        processing_times: Nested list: processing_times[i][j] -> time of
            job j on machine i.
    """

    instance_id: int
    jobs_number: int
    machines_number: int
    time_seed: int
    processing_times: ProcessingTimes

    @property
    def name(self) -> str:
        return f"ta{self.instance_id:03d}"

    def job_times(self, job: int) -> list[int]:
        """Processing times of ``job`` on machines 0..M-1."""
        if not (0 <= job < self.jobs_number):
            raise IndexError(f"job {job} out of range [0, {self.jobs_number})")
        return [row[job] for row in self.processing_times]

    def as_tuple(self) -> tuple[int, int, ProcessingTimes]:
        """``(jobs_number, machines_number, processing_times)``."""
        return self.jobs_number, self.machines_number, self.processing_times
