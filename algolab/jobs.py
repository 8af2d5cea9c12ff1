"""Job sequencing with deadlines for the greatest profit."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Job:
    """A unit-time job that must finish by its deadline to earn its profit."""

    job_id: str
    deadline: int
    profit: int


def job_sequencing(jobs: Iterable[Job]) -> list[str]:
    """Return the ids of the scheduled jobs in slot order."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Optional[str]] = [None] * len(ordered)
    for job in ordered:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job.job_id
                break
    return [job_id for job_id in slots if job_id is not None]


def main(argv: Sequence[str] | None = None) -> int:
    tokens = (token for line in sys.stdin for token in line.split())
    try:
        print("Enter number of jobs: ", end="")
        count = int(next(tokens))
        print("Enter job id, deadline and profit:")
        jobs = [Job(next(tokens), int(next(tokens)), int(next(tokens))) for _ in range(count)]
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print("Job order for max profit: " + "".join(f"{job_id} " for job_id in job_sequencing(jobs)))
    return 0


if __name__ == "__main__":
    sys.exit(main())