import csv
import json

import pytest

from flocksim.analysis.export import (
    export_trials_to_csv, export_run_report, calculate_aggregate_stats, summarize
)


def fake_result(trial, killed, first_kill):
    return {
        "trial": trial,
        "steps": 100,
        "prey_count": 10,
        "predator_count": 1,
        "final_alive_prey": 10 - killed,
        "total_killed": killed,
        "first_kill_step": first_kill,
        "kills_per_step": killed / 100,
        "avg_cohesion": 12.5,
        "avg_prey_speed": 50.0,
        "avg_predator_speed": 90.0,
        "elapsed_time_seconds": 0.1,
        "survival_over_time": [{"step": 0, "alive": 10}],
        "cohesion_over_time": [{"step": 0, "cohesion": 12.5}],
    }


def test_summarize_drops_series():
    summary = summarize(fake_result(1, 2, 30))
    assert "survival_over_time" not in summary
    assert "cohesion_over_time" not in summary
    assert summary["total_killed"] == 2


def test_export_trials_to_csv(tmp_path):
    path = tmp_path / "trials.csv"
    export_trials_to_csv([fake_result(1, 2, 30), fake_result(2, 0, None)], str(path))

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["trial"] == "1"
    assert rows[0]["total_killed"] == "2"
    assert rows[1]["first_kill_step"] == ""


def test_export_run_report_writes_summaries_only(tmp_path):
    path = tmp_path / "report.json"
    report = {"run_config": {"steps": 100}, "trial_results": [fake_result(1, 2, 30)]}
    export_run_report(report, str(path))

    with open(path) as f:
        data = json.load(f)
    assert data["run_config"] == {"steps": 100}
    assert "survival_over_time" not in data["trial_results"][0]
    # caller's report is untouched
    assert "survival_over_time" in report["trial_results"][0]


def test_calculate_aggregate_stats():
    stats = calculate_aggregate_stats([fake_result(1, 2, 30), fake_result(2, 4, None)])
    assert stats["total_killed_mean"] == pytest.approx(3)
    assert stats["total_killed_std"] == pytest.approx(2 ** 0.5)
    assert stats["first_kill_step_mean"] == 30
    assert stats["first_kill_step_std"] == 0


def test_calculate_aggregate_stats_empty():
    assert calculate_aggregate_stats([]) == {}
