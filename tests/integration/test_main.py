"""
Integration tests for the command-line entry point.
"""
import os

import main


class TestMain:
    """Test running scenarios from the command line."""

    def test_default_scenario(self, capsys):
        assert main.main([]) == 0

        out = capsys.readouterr().out
        assert "=== Wizzrobe's Magma Bath ===" in out
        assert "Fiery-wizzrobe attacks Watery-cthulhu at level 8" in out
        assert "Watery-cthulhu (Water Monster): 12 HP" in out

    def test_quiet(self, capsys):
        assert main.main(["--quiet"]) == 0

        out = capsys.readouterr().out
        assert "charges up to attack" not in out
        assert "Final state:" in out

    def test_list(self, capsys):
        assert main.main(["--list"]) == 0
        assert "wizzrobe.yaml" in capsys.readouterr().out

    def test_missing_scenario(self, tmp_path, capsys):
        assert main.main([str(tmp_path / "missing.yaml")]) == 1
        assert "Scenario file not found" in capsys.readouterr().err

    def test_malformed_scenario(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("actor: fire\n", encoding="utf-8")

        assert main.main([str(path)]) == 1
        assert "Error: Combatant entry must be a mapping" in capsys.readouterr().err

    def test_save_log(self, tmp_path, capsys):
        log_dir = tmp_path / "logs"

        assert main.main(["--quiet", "--save-log", str(log_dir)]) == 0

        saved = os.listdir(log_dir)
        assert len(saved) == 1
        assert saved[0].startswith("arena_")
        assert "Log saved to" in capsys.readouterr().out
