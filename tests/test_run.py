"""Tests for the command line entry point."""

import json
import sys

import pytest

import run


class TestMain:
    """Tests for run.main()."""

    def test_default_pitch_text_report(self, capsys):
        assert run.main([]) == 0
        out = capsys.readouterr().out
        assert "Status:         solved" in out
        assert "Flight time:" in out

    def test_json_report_with_path(self, capsys):
        assert run.main(["--json", "--samples", "5", "--target-x", "0.1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["reachable"] is True
        assert len(data["path"]) == 5
        assert data["path"][0][0] == 0.0
        assert data["closest_sample"]["distance_m"] < 1e-6
        assert data["target_point"][0] == 0.1

    def test_overrides_preset(self, capsys):
        run.main(["--json", "--pitch", "curveball", "--speed", "90"])
        data = json.loads(capsys.readouterr().out)
        assert data["reachable"] is True
        assert data["acceleration"][1] < -9.81

    def test_unreachable_exit_code(self, capsys):
        assert run.main(["--speed", "10"]) == 1
        assert "not reachable" in capsys.readouterr().out

    def test_bad_speed(self, capsys):
        assert run.main(["--speed", "0"]) == 2
        assert capsys.readouterr().out == ""

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"release_point": [0.0, 1.5, -16.0]}))
        assert run.main(["--json", "--config", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["release_point"] == [0.0, 1.5, -16.0]

    def test_missing_config_file(self, tmp_path):
        assert run.main(["--config", str(tmp_path / "nope.json")]) == 2

    def test_unknown_pitch_rejected_by_argparse(self):
        with pytest.raises(SystemExit):
            run.main(["--pitch", "eephus"])


class TestExceptHook:
    """Tests for the crash log hook."""

    def test_main_installs_hook(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
        assert run.main([]) == 0
        assert sys.excepthook is run.excepthook

    def test_writes_crash_log(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            with pytest.raises(SystemExit):
                run.excepthook(type(e), e, e.__traceback__)
        text = (tmp_path / "crash_log.txt").read_text(encoding="utf-8")
        assert "RuntimeError: boom" in text
