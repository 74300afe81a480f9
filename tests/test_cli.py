import io
import re

import pytest

from stratbot.cli import main
from stratbot.market import Market

GENERATED_FILES = (
    "bullish_low_vol.txt",
    "bullish_high_vol.txt",
    "bearish_low_vol.txt",
    "bearish_high_vol.txt",
)


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    assert main(["0", "--data-dir", str(directory)]) == 0
    return directory


def _value_after(output, prefix):
    for line in output.splitlines():
        if line.startswith(prefix):
            return line[len(prefix):]
    raise AssertionError(f"no line starting with {prefix!r}")


def test_case_zero_writes_all_market_files(data_dir):
    assert sorted(p.name for p in data_dir.iterdir()) == sorted(GENERATED_FILES)
    for name in GENERATED_FILES:
        market = Market.from_file(name, data_dir)
        assert market.num_trading_days == 252
        assert market.prices[0] == 100.0


def test_case_zero_parameters_match_scenarios(data_dir):
    bull = Market.from_file("bullish_high_vol.txt", data_dir)
    bear = Market.from_file("bearish_low_vol.txt", data_dir)
    assert bull.volatility == pytest.approx(0.40)
    assert bull.expected_yearly_return == pytest.approx(1.0)
    assert bear.volatility == pytest.approx(0.15)
    assert bear.expected_yearly_return == pytest.approx(-0.8)
    assert bull.seed == 999


def test_case_one_prints_every_day(tmp_path, capsys):
    assert main(["1", "--data-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    day_lines = [line for line in out.splitlines() if line.startswith("Day ")]
    assert len(day_lines) == 252
    assert day_lines[0] == "Day 0: 100"
    assert day_lines[-1].startswith("Day 251: ")
    assert out.rstrip().endswith("Test case 1 done")


def test_case_two_loaded_matches_simulated(data_dir, capsys):
    capsys.readouterr()
    assert main(["2", "--data-dir", str(data_dir)]) == 0
    out = capsys.readouterr().out
    assert _value_after(out, "Simulated market last price: ") == _value_after(
        out, "Loaded market last price: "
    )
    assert _value_after(out, "Loaded market volatility: ") == "0.15"
    assert _value_after(out, "Loaded market expected yearly return: ") == "1"
    assert "Test case 2 done" in out


def test_case_three_picks_one_of_the_strategies(data_dir, capsys):
    capsys.readouterr()
    assert main(["3", "--data-dir", str(data_dir)]) == 0
    out = capsys.readouterr().out
    names = {
        f"{kind} {n}"
        for kind in ("Mean Reversion", "Trend Following", "Weighted Trend Following")
        for n in (1, 2, 3)
    }
    assert _value_after(out, "Best strategy: ") in names
    float(_value_after(out, "Best return: "))
    assert "Test case 3 done" in out


@pytest.mark.parametrize("case", ["4", "5"])
def test_sweep_cases_pick_generated_strategy(data_dir, capsys, case):
    capsys.readouterr()
    assert main([case, "--data-dir", str(data_dir)]) == 0
    out = capsys.readouterr().out
    best = _value_after(out, "Best strategy: ")
    assert re.fullmatch(r"(WeightedTrend|Trend|MeanReversion)_\d+_\d+", best)
    assert f"Test case {case} done" in out


@pytest.mark.parametrize("case", ["99", "-1", "abc"])
def test_invalid_case_number(tmp_path, capsys, case):
    assert main([case, "--data-dir", str(tmp_path)]) == 0
    assert "Invalid test number!" in capsys.readouterr().out


def test_case_read_from_prompt(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main(["--data-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Please input test case number: ")
    assert "Invalid test number!" in out


def test_missing_market_file_fails(tmp_path, capsys):
    assert main(["3", "--data-dir", str(tmp_path / "empty")]) == 1
    assert "Error" in capsys.readouterr().err