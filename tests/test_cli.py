"""Tests for CLI interface."""

from typer.testing import CliRunner

from dirpick.cli import app

runner = CliRunner()

AUTOMATED = {"DIRPICK_AUTOMATION": "1"}


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "dirpick version" in result.stdout

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "dirpick version" in result.stdout


class TestHelp:
    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "pick" in result.stdout
        assert "create" in result.stdout
        assert "check" in result.stdout

    def test_pick_help(self):
        result = runner.invoke(app, ["pick", "--help"])
        assert result.exit_code == 0
        assert "--exclude" in result.stdout
        assert "--multiple" in result.stdout

    def test_create_help(self):
        result = runner.invoke(app, ["create", "--help"])
        assert result.exit_code == 0
        assert "--dry-run" in result.stdout


class TestPick:
    def test_single(self, folders):
        result = runner.invoke(app, ["pick", str(folders)], env=AUTOMATED)
        assert result.exit_code == 0
        assert str(folders / "Folder1") in result.stdout

    def test_multiple_in_requested_order(self, folders):
        env = {**AUTOMATED, "DIRPICK_MENU_SELECTION": "2,0"}
        result = runner.invoke(app, ["pick", str(folders), "--multiple"], env=env)

        assert result.exit_code == 0
        lines = [line for line in result.stdout.splitlines() if line.strip()]
        assert lines == [str(folders / "Folder3"), str(folders / "Folder1")]

    def test_exclude(self, folders):
        result = runner.invoke(app, ["pick", str(folders), "-x", "Folder1", "-x", "Folder2"], env=AUTOMATED)
        assert result.exit_code == 0
        assert str(folders / "Folder3") in result.stdout

    def test_exclude_empty(self, folders):
        env = {**AUTOMATED, "DIRPICK_MENU_SELECTION": "1"}
        result = runner.invoke(app, ["pick", str(folders), "--exclude-empty"], env=env)
        assert result.exit_code == 0
        assert str(folders / "Folder3") in result.stdout

    def test_missing_base(self, tmp_path):
        result = runner.invoke(app, ["pick", str(tmp_path / "missing")], env=AUTOMATED)
        assert result.exit_code == 1
        assert "Folder not found" in result.output

    def test_nothing_to_pick(self, folders):
        result = runner.invoke(app, ["pick", str(folders), "-x", "*"], env=AUTOMATED)
        assert result.exit_code == 1
        assert "No folders to choose from" in result.output

    def test_summary(self, folders):
        result = runner.invoke(app, ["pick", str(folders), "--summary"], env=AUTOMATED)
        assert result.exit_code == 0
        assert "Selected Folders" in result.output

    def test_attempts_must_be_positive(self, folders):
        result = runner.invoke(app, ["pick", str(folders), "--attempts", "0"], env=AUTOMATED)
        assert result.exit_code != 0


class TestCreate:
    def test_create(self, tmp_path):
        result = runner.invoke(app, ["create", str(tmp_path), "reports"], env=AUTOMATED)
        assert result.exit_code == 0
        assert (tmp_path / "reports").is_dir()
        assert str(tmp_path / "reports") in result.stdout

    def test_already_exists(self, tmp_path):
        (tmp_path / "reports").mkdir()
        result = runner.invoke(app, ["create", str(tmp_path), "reports"], env=AUTOMATED)
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_dry_run(self, tmp_path):
        result = runner.invoke(app, ["create", str(tmp_path), "later", "--dry-run"], env=AUTOMATED)
        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert not (tmp_path / "later").exists()

    def test_invalid_name(self, tmp_path):
        result = runner.invoke(app, ["create", str(tmp_path), ".."], env=AUTOMATED)
        assert result.exit_code == 1
        assert "reserved" in result.output

    def test_no_name_in_automation(self, tmp_path):
        result = runner.invoke(app, ["create", str(tmp_path)], env=AUTOMATED)
        assert result.exit_code == 1
        assert list(tmp_path.iterdir()) == []

    def test_missing_parent(self, tmp_path):
        result = runner.invoke(app, ["create", str(tmp_path / "nope"), "child"], env=AUTOMATED)
        assert result.exit_code == 1
        assert "Parent folder not found" in result.output


class TestCheck:
    def test_valid(self):
        result = runner.invoke(app, ["check", "reports"])
        assert result.exit_code == 0
        assert "valid folder name" in result.output

    def test_invalid_characters(self):
        result = runner.invoke(app, ["check", "a:b", "--platform", "win32"])
        assert result.exit_code == 1
        assert "invalid characters" in result.output

    def test_device_name_only_on_windows(self):
        assert runner.invoke(app, ["check", "CON", "-p", "win32"]).exit_code == 1
        assert runner.invoke(app, ["check", "CON", "-p", "linux"]).exit_code == 0
