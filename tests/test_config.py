import io

import pytest

from cashflow_tvm.config import SolverConfig, load_solver_config


def test_defaults_without_source():
    cfg = load_solver_config(environ={})
    assert cfg == SolverConfig(tolerance=0.01, max_iterations=1000)


def test_grouped_yaml_section_is_flattened():
    text = "solver:\n  tolerance: 0.001\n  max_iterations: 50\n"
    cfg = load_solver_config(io.StringIO(text), environ={})
    assert cfg.tolerance == pytest.approx(0.001)
    assert cfg.max_iterations == 50


def test_top_level_keys_win(tmp_path):
    p = tmp_path / "solver.yaml"
    p.write_text("tolerance: 0.5\nsolver: { tolerance: 0.1 }\n", encoding="utf-8")
    assert load_solver_config(p, environ={}).tolerance == pytest.approx(0.5)


def test_environment_overrides_file():
    text = "solver: { tolerance: 0.001, max_iterations: 50 }\n"
    env = {"IRR_TOLERANCE": "1e-6", "IRR_MAX_ITERATIONS": "7"}
    cfg = load_solver_config(io.StringIO(text), environ=env)
    assert cfg == SolverConfig(tolerance=1e-6, max_iterations=7)


def test_process_environment_is_read(monkeypatch):
    monkeypatch.setenv("IRR_MAX_ITERATIONS", "12")
    monkeypatch.delenv("IRR_TOLERANCE", raising=False)
    assert load_solver_config().max_iterations == 12


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        SolverConfig(tolerance=-1.0)
    with pytest.raises(ValueError):
        load_solver_config(io.StringIO("max_iterations: -3\n"), environ={})


def test_malformed_yaml_raises():
    with pytest.raises(ValueError):
        load_solver_config(io.StringIO("tolerance: [1, 2\n"), environ={})
    with pytest.raises(ValueError):
        load_solver_config(io.StringIO("- 1\n- 2\n"), environ={})


def test_merged_ignores_unknown_and_missing_keys():
    base = SolverConfig()
    assert base.merged(None) is base
    assert base.merged({"colour": "blue"}) is base
    assert base.merged({"max_iterations": 3}).max_iterations == 3
