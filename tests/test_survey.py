import csv
import json

import pytest

from starforge import build_universe
from starforge.survey import SurveyWriter, main, run_survey


class TestSurveyWriter:
    def test_rows_per_planet(self, tmp_path):
        universe = build_universe(seed=3)
        with SurveyWriter(tmp_path, run_id="unit") as writer:
            writer.log_universe(3, universe)
            writer.write_meta({"count": 1})
        with writer.systems_path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
        assert len(rows) == len(universe.system)
        assert rows[0]["system"] == universe.system_name
        assert rows[0]["planet"] == "1"
        assert json.loads(writer.meta_path.read_text(encoding="utf-8")) == {"count": 1}

    def test_run_dirs_do_not_collide(self, tmp_path):
        first = SurveyWriter(tmp_path, run_id="same")
        second = SurveyWriter(tmp_path, run_id="same")
        first.close()
        second.close()
        assert first.run_dir != second.run_dir
        assert second.run_dir.name == "same_01"


class TestRunSurvey:
    def test_outputs(self, tmp_path):
        run_dir, summary = run_survey(5, 10, tmp_path)
        assert (run_dir / "systems.csv").exists()
        assert (run_dir / "meta.json").exists()
        assert (run_dir / "figs" / "planet_types.png").exists()
        assert (run_dir / "figs" / "orbit_vs_size.png").exists()
        assert summary["systems"] == 5
        assert 15 <= summary["planets"] <= 50

    def test_count_must_be_positive(self, tmp_path):
        with pytest.raises(ValueError):
            run_survey(0, 1, tmp_path)

    def test_cli(self, tmp_path, capsys):
        assert main(["--count", "2", "--seed", "4", "--out", str(tmp_path)]) == 0
        assert "Systems: 2" in capsys.readouterr().out
