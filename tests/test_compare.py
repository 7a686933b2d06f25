"""Tests for the compare command line tool."""

import matplotlib

matplotlib.use("Agg")

import pytest

from simulations import compare


def test_main_prints_report(capsys):
    assert compare.main(["--prisoners", "10", "--trials", "50"]) == 0
    out = capsys.readouterr().out
    assert "Iterations:    50" in out
    assert "Boxes to open: 5" in out


def test_main_plot(monkeypatch):
    monkeypatch.setattr(compare.plt, "show", lambda: None)
    assert compare.main(["--prisoners", "6", "--trials", "30", "--plot"]) == 0


def test_main_sweep(monkeypatch, capsys):
    monkeypatch.setattr(compare.plt, "show", lambda: None)
    assert compare.main(["--prisoners", "4", "--trials", "20", "--sweep"]) == 0
    assert "open_limit=4" in capsys.readouterr().out


def test_main_rejects_invalid_configuration():
    with pytest.raises(SystemExit) as exc:
        compare.main(["--prisoners", "10", "--open-limit", "11", "--trials", "5"])
    assert exc.value.code == 2


def test_default_worker_count():
    assert compare.default_worker_count() >= 2


def test_main_sweep_rejects_no_prisoners():
    with pytest.raises(SystemExit) as exc:
        compare.main(["--prisoners", "0", "--trials", "10", "--sweep"])
    assert exc.value.code == 2
