import pytest

from classicalgos.cli import main
from classicalgos.dynamic import knapsack
from classicalgos.graphs import Edge, bellman_ford, prim_mst
from classicalgos.greedy import Job, sequence_jobs
from classicalgos.matching import kmp_search

PRIM_GRAPH = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

BELLMAN_EDGES = [
    Edge(0, 1, -1), Edge(0, 2, 4), Edge(1, 2, 3), Edge(1, 3, 2),
    Edge(1, 4, 2), Edge(3, 2, 5), Edge(3, 1, 1), Edge(4, 3, -3),
]


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_knapsack_default(capsys):
    assert main(["knapsack"]) == 0
    expected = knapsack(50, [10, 20, 30], [60, 100, 120])
    assert _lines(capsys) == [f"Maximum profit: {expected}"]


def test_knapsack_capacity_option(capsys):
    main(["knapsack", "--capacity", "30"])
    expected = knapsack(30, [10, 20, 30], [60, 100, 120])
    assert _lines(capsys) == [f"Maximum profit: {expected}"]


def test_prim_output(capsys):
    main(["prim"])
    lines = _lines(capsys)
    assert lines[0] == "Edge   Weight"
    expected = [f"{e.u} - {e.v}    {e.weight}" for e in prim_mst(PRIM_GRAPH)]
    assert lines[1:] == expected


def test_bellman_ford_output(capsys):
    main(["bellman-ford"])
    lines = _lines(capsys)
    assert lines[0] == "Vertex   Distance from Source"
    distances = bellman_ford(BELLMAN_EDGES, 5, 0)
    assert lines[1:] == [f"{v} \t\t {d}" for v, d in enumerate(distances)]


def test_bellman_ford_other_source(capsys):
    main(["bellman-ford", "--source", "1"])
    lines = _lines(capsys)
    assert lines[1] == "0 \t\t INF"
    assert len(lines) == 6


def test_kmp_default(capsys):
    main(["kmp"])
    expected = [f"Pattern found at index {i}" for i in kmp_search("ABCCABABCA", "ABCA")]
    assert _lines(capsys) == expected


def test_kmp_custom_text(capsys):
    main(["kmp", "AAAA", "AA"])
    expected = [f"Pattern found at index {i}" for i in kmp_search("AAAA", "AA")]
    assert _lines(capsys) == expected


def test_jobs_output(capsys):
    main(["jobs"])
    jobs = [
        Job("a", 2, 100), Job("b", 1, 19), Job("c", 2, 27),
        Job("d", 1, 25), Job("e", 3, 15),
    ]
    expected = "Job sequence for maximum profit: " + " ".join(sequence_jobs(jobs))
    assert _lines(capsys) == [expected]


def test_no_command_runs_everything(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Maximum profit:" in out
    assert "Edge   Weight" in out
    assert "Vertex   Distance from Source" in out
    assert "Pattern found at index" in out
    assert "Job sequence for maximum profit:" in out


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2


def test_bad_source_reports_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["bellman-ford", "--source", "9"])
    assert excinfo.value.code == 2