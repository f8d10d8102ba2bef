"""Tests for the command-line entrypoint."""

from __future__ import annotations

import pytest

from mnist_visualizer.__main__ import build_parser, main


def test_summary_prints_architecture_without_ui(capsys) -> None:
    main(["--summary", "--seed", "3"])
    out = capsys.readouterr().out

    assert "784->64" in out
    assert "Total parameters: 52650" in out


def test_parser_defaults_match_settings_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.seed is None
    assert args.max_connections == 8
    assert args.weak_threshold == 0.0
    assert args.line_thickness == 1.0
    assert args.brush_size == 2


def test_out_of_range_setting_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--summary", "--max-connections", "50"])
    assert excinfo.value.code == 2


def test_launches_ui_with_seeded_parameters(monkeypatch) -> None:
    launched = {}

    def _fake_ui_main(params, settings) -> None:
        launched["params"] = params
        launched["settings"] = settings

    import mnist_visualizer.app as app_mod

    monkeypatch.setattr(app_mod, "main", _fake_ui_main)
    main(["--seed", "9", "--brush-size", "3"])

    assert launched["settings"].brush_size == 3
    assert launched["params"].layer1.weights.shape == (64, 784)
