import json

import pytest

from src.cli import load_scenario, main


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps({"name": "Main Line", "draw_schedule": [50000], "origination_fee": 0}))
    return path


class TestLoadScenario:
    def test_fields_and_defaults(self, scenario_file):
        scenario = load_scenario(str(scenario_file))
        assert scenario.name == "Main Line"
        assert scenario.draw_schedule == (50000.0,)
        assert scenario.prime_rate == 7.25

    def test_default_name(self, tmp_path):
        path = tmp_path / "b.json"
        path.write_text("{}")
        assert load_scenario(str(path), default_name="Scenario B").name == "Scenario B"


class TestMain:
    def test_single_scenario_report(self, scenario_file, capsys):
        assert main([str(scenario_file)]) == 0
        out = capsys.readouterr().out
        assert "Summary: Main Line" in out
        assert "Peak Balance:         $50,000" in out
        assert "Yearly Summary" in out
        assert "more periods (use --all)" in out

    def test_writes_schedule_csv(self, scenario_file, tmp_path):
        out_path = tmp_path / "schedule.csv"
        assert main([str(scenario_file), "--csv", str(out_path), "--all"]) == 0
        lines = out_path.read_text().split("\n")
        assert lines[0].startswith("Month,Beginning Balance")
        assert len(lines) == 85

    def test_comparison(self, scenario_file, tmp_path, capsys):
        other = tmp_path / "other.json"
        other.write_text(json.dumps({"draw_schedule": [50000], "margin": 4.0}))
        out_path = tmp_path / "comparison.csv"
        assert main([str(scenario_file), "--compare", str(other), "--csv", str(out_path)]) == 0
        assert "Scenario Comparison: Main Line vs Scenario B" in capsys.readouterr().out
        assert out_path.read_text().startswith('"Metric","Main Line","Scenario B","Difference"')

    def test_preset_replaces_draw_schedule(self, scenario_file, capsys):
        assert main([str(scenario_file), "--preset", "payroll"]) == 0
        out = capsys.readouterr().out
        # Twelve $10K draws on a $100K line: the last two are clamped to zero
        assert "Total Draws:          $100,000" in out
        assert "Draw Events:          10" in out

    def test_unknown_preset_exits(self):
        with pytest.raises(SystemExit):
            main(["--preset", "monthly"])

    def test_empty_schedule_csv_not_written(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"repayment_term": 0}))
        out_path = tmp_path / "schedule.csv"
        assert main([str(path), "--csv", str(out_path)]) == 1
        assert not out_path.exists()

    def test_invalid_scenario_exits(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"repayment_cadence": "daily"}))
        with pytest.raises(SystemExit):
            main([str(path)])

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "nope.json")])
