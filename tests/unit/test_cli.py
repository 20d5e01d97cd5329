"""Unit tests for the command line entry point."""

from moonsim.cli import main


class TestCli:
    """Tests for moonsim.cli.main."""

    def test_prints_energy_and_period(self, tmp_path, capsys, example_a_text):
        """Energy and period are printed on two lines."""
        path = tmp_path / "moons.txt"
        path.write_text(example_a_text, encoding="utf-8")

        assert main([str(path), "--steps", "10"]) == 0
        out = capsys.readouterr().out.split()
        assert out == ["179", "2772"]

    def test_missing_file(self, tmp_path, capsys):
        """A missing input file exits with status 1."""
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_bad_input(self, tmp_path, capsys):
        """A malformed line is reported with its number."""
        path = tmp_path / "moons.txt"
        path.write_text("<x=1, y=2, z=3>\nnot a moon\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "line 2" in capsys.readouterr().err

    def test_bad_steps(self, tmp_path, capsys, example_a_text):
        """A negative step count is rejected."""
        path = tmp_path / "moons.txt"
        path.write_text(example_a_text, encoding="utf-8")

        assert main([str(path), "--steps", "-5"]) == 1
        assert "n_steps" in capsys.readouterr().err
