# test_run.py

import logging

import pandas as pd
import pytest

import noisy_clusters.run as run
from noisy_clusters.config import PipelineConfig
from noisy_clusters.errors import FitError


@pytest.fixture
def config(tmp_path):
    return PipelineConfig(
        table_path=str(tmp_path / "final_clustered.csv"),
        plot_path=str(tmp_path / "clusters.png"),
        random_state=0,
    )


def test_run_pipeline_writes_both_outputs(config, tmp_path):
    labeled = run.run_pipeline(config)

    assert len(labeled) == 150
    assert {r.cluster for r in labeled} == {0, 1, 2}
    assert (tmp_path / "clusters.png").exists()

    df = pd.read_csv(tmp_path / "final_clustered.csv")
    assert list(df.columns) == ["true_x", "true_y", "noisy_x", "noisy_y", "cluster"]
    assert len(df) == 150


def test_run_pipeline_twice_overwrites(config, tmp_path):
    run.run_pipeline(config)
    run.run_pipeline(config)
    assert len(pd.read_csv(tmp_path / "final_clustered.csv")) == 150
    assert sorted(p.name for p in tmp_path.iterdir()) == ["clusters.png", "final_clustered.csv"]


def test_run_pipeline_seeded_is_reproducible(config):
    assert run.run_pipeline(config) == run.run_pipeline(config)


def test_run_pipeline_propagates_errors(tmp_path):
    config = PipelineConfig(
        n_clusters=500,
        table_path=str(tmp_path / "t.csv"),
        plot_path=str(tmp_path / "p.png"),
    )
    with pytest.raises(FitError):
        run.run_pipeline(config)
    assert list(tmp_path.iterdir()) == []


def test_main_success(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert run.main() == 0

    assert (tmp_path / "final_clustered.csv").exists()
    assert (tmp_path / "clusters.png").exists()
    assert "Saved clustered table" in capsys.readouterr().out


def test_main_failure_returns_nonzero(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(run, "PipelineConfig", lambda: PipelineConfig(n_clusters=500))

    assert run.main() == 1
    assert not (tmp_path / "final_clustered.csv").exists()
    assert not (tmp_path / "clusters.png").exists()


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.getLogger("noisy_clusters").handlers.clear()
