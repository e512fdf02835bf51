from typer.testing import CliRunner

from ipcloak.cli import app

runner = CliRunner()


def _stdout_lines(result):
    return result.stdout.splitlines()


def test_cli_localhost():
    result = runner.invoke(app, ["127.0.0.1"])
    assert result.exit_code == 0
    lines = _stdout_lines(result)
    assert len(lines) == 21
    assert lines[0] == "2130706433"
    assert lines[1] == "0x7F000001"
    assert lines[3] == "0x7F.0x00.0x00.0x01"
    assert result.stdout.endswith("\n")


def test_cli_prefix_and_postfix():
    result = runner.invoke(app, ["192.168.100.1", "[", "]"])
    assert result.exit_code == 0
    lines = _stdout_lines(result)
    assert len(lines) == 21
    assert lines[0] == "[3232261121]"
    assert all(line.startswith("[") and line.endswith("]") for line in lines)


def test_cli_prefix_only():
    result = runner.invoke(app, ["1.2.3.4", "http://"])
    assert result.exit_code == 0
    lines = _stdout_lines(result)
    assert lines[0] == "http://16909060"
    assert all(line.startswith("http://") for line in lines)


def test_cli_invalid_address():
    result = runner.invoke(app, ["999.1.1.1"])
    assert result.exit_code == 1
    assert "Invalid IP address" in result.output
    assert result.stdout == ""


def test_cli_missing_address():
    result = runner.invoke(app, [])
    assert result.exit_code == 2
    assert "Usage:" in result.output
    assert result.stdout == ""


def test_cli_verify():
    result = runner.invoke(app, ["--verify", "10.9.8.7"])
    assert result.exit_code == 0
    assert _stdout_lines(result)[0] == "168364039"


def test_cli_export(tmp_path):
    out = tmp_path / "catalog.csv"
    result = runner.invoke(app, ["--export", str(out), "127.0.0.1"])
    assert result.exit_code == 0
    assert out.exists()
    assert "0x7F.0x00.0x00.0x01" in out.read_text()


def test_cli_decoration_that_looks_like_options():
    result = runner.invoke(app, ["127.0.0.1", "-->", "<--"])
    assert result.exit_code == 0
    lines = _stdout_lines(result)
    assert len(lines) == 21
    assert lines[0] == "-->2130706433<--"
    assert all(line.startswith("-->") and line.endswith("<--") for line in lines)


def test_cli_own_option_names_after_ip_are_decoration():
    result = runner.invoke(app, ["127.0.0.1", "-v", "--verify"])
    assert result.exit_code == 0
    lines = _stdout_lines(result)
    assert len(lines) == 21
    assert lines[0] == "-v2130706433--verify"
    assert "DEBUG" not in result.output


def test_cli_export_failure_prints_nothing(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    result = runner.invoke(app, ["--export", str(blocker / "catalog.csv"), "127.0.0.1"])
    assert result.exit_code == 1
    assert "cannot write catalog" in result.output
    assert "Traceback" not in result.output
    assert result.stdout == ""
