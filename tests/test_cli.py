import ctypes.util, json
import pytest
from click.testing import CliRunner
from dirbridge import reporter
from dirbridge.cli import cli


def test_report_command(listing_dir):
    result = CliRunner().invoke(cli, ["report", str(listing_dir)])
    assert result.exit_code == 0
    assert result.stdout == reporter.generate_report(str(listing_dir)) + "\n"


@pytest.mark.skipif(ctypes.util.find_library("c") is None, reason="C library not available")
def test_report_command_native(listing_dir):
    result = CliRunner().invoke(cli, ["report", "--native", str(listing_dir)])
    assert result.exit_code == 0
    assert "a.txt -> 12 Bytes" in result.output


def test_report_missing_path_still_exits_zero(tmp_path):
    result = CliRunner().invoke(cli, ["report", str(tmp_path / "missing")])
    assert result.exit_code == 0
    assert "does not exist" in result.output


def test_tools_command():
    result = CliRunner().invoke(cli, ["tools"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["name"] == "load_directory_report"


def test_call_command(tmp_path):
    args = json.dumps({"path": str(tmp_path)})
    result = CliRunner().invoke(cli, ["call", "load_directory_report", args])
    assert result.exit_code == 0
    assert "contains no entries" in result.output
