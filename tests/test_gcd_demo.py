import io

from gostudy.basics import gcd
from gostudy.gcd_demo import main, run

PAIRS = [(10, 5), (30, 9), (100, 9), (25, 5)]


def _input_for(pairs):
    lines = [str(len(pairs))] + [f"{a} {b}" for a, b in pairs]
    return "\n".join(lines) + "\n"


def test_run_prints_gcd_of_each_pair():
    out = io.StringIO()
    run(io.StringIO(_input_for(PAIRS)), out)
    assert out.getvalue().splitlines() == [str(gcd(a, b)) for a, b in PAIRS]


def test_run_pins_known_values():
    out = io.StringIO()
    run(io.StringIO("2\n10 5\n30 9\n"), out)
    assert out.getvalue() == "5\n3\n"


def test_run_only_reads_count_pairs():
    out = io.StringIO()
    run(io.StringIO(_input_for(PAIRS[:1]) + "30 9\n"), out)
    assert out.getvalue().splitlines() == [str(gcd(*PAIRS[0]))]


def test_run_empty_input_prints_nothing():
    out = io.StringIO()
    run(io.StringIO(""), out)
    assert out.getvalue() == ""


def test_run_missing_numbers_read_as_zero():
    out = io.StringIO()
    run(io.StringIO("1\n7\n"), out)
    assert out.getvalue().splitlines() == [str(gcd(7, 0))]


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_input_for(PAIRS)))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [str(gcd(a, b)) for a, b in PAIRS]