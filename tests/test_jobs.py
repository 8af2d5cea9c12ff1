import io

import pytest

from algolab.jobs import Job, job_sequencing, main

CLASSIC = [
    Job("a", 2, 100),
    Job("b", 1, 19),
    Job("c", 2, 27),
    Job("d", 1, 25),
    Job("e", 3, 15),
]


def test_classic_example():
    assert job_sequencing(CLASSIC) == ["c", "a", "e"]


@pytest.mark.parametrize(
    "jobs",
    [
        CLASSIC,
        [Job("p", 4, 20), Job("q", 1, 10), Job("r", 1, 40), Job("s", 1, 30)],
        [Job("x", 5, 1), Job("y", 5, 2), Job("z", 5, 3)],
    ],
)
def test_schedule_meets_deadlines(jobs):
    by_id = {job.job_id: job for job in jobs}
    result = job_sequencing(jobs)
    assert len(result) == len(set(result)) <= len(jobs)
    for position, job_id in enumerate(result):
        assert position < by_id[job_id].deadline


def test_generous_deadlines_schedule_everything():
    jobs = [Job("x", 5, 1), Job("y", 5, 2), Job("z", 5, 3)]
    assert sorted(job_sequencing(jobs)) == ["x", "y", "z"]


def test_most_profitable_wins_a_single_slot():
    jobs = [Job("q", 1, 10), Job("r", 1, 40), Job("s", 1, 30)]
    assert job_sequencing(jobs) == ["r"]


def test_zero_deadline_is_never_scheduled():
    assert job_sequencing([Job("z", 0, 99)]) == []


def test_empty():
    assert job_sequencing([]) == []


def test_input_not_reordered():
    jobs = list(CLASSIC)
    job_sequencing(jobs)
    assert jobs == CLASSIC


def test_main(monkeypatch, capsys):
    text = "5\n" + "".join(f"{j.job_id} {j.deadline} {j.profit}\n" for j in CLASSIC)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    expected = "".join(f"{job_id} " for job_id in job_sequencing(CLASSIC))
    assert f"Job order for max profit: {expected}" in capsys.readouterr().out


def test_main_bad_number(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\na x 5\n"))
    assert main([]) == 1