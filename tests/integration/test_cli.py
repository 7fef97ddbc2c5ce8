"""Integration tests for the toll-fee command."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from app import main
from src.config.logging_config import setup_logging
from src.core.policy_loader import PolicyLoader
from src.models.defaults import DEFAULT_POLICY

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture(autouse=True)
def restore_logging():
    """Put logging back on stdout after main() moved it to stderr."""
    yield
    setup_logging(level="INFO")


class TestTollFeeCommand:
    """Test the command line entry point end-to-end."""

    def test_total_from_arguments(self, capsys):
        """Test timestamps given on the command line."""
        exit_code = main([
            "--vehicle", "Car",
            "2023-02-02T06:15:00",
            "2023-02-01T08:00:00",
            "2023-02-01T06:15:00",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "34"

    def test_exempt_vehicle(self, capsys):
        """Test an exempt vehicle is charged nothing."""
        assert main(["--vehicle", "Emergency", "2023-02-01T07:30:00"]) == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_breakdown_from_input_file(self, tmp_path, capsys):
        """Test a JSON request file with the breakdown output."""
        request = tmp_path / "request.json"
        request.write_text(json.dumps({
            "vehicle_type": "Car",
            "timestamps": ["2023-02-01T06:15:00", "2023-02-01T08:00:00", "2023-02-02T06:15:00"],
        }), encoding="utf-8")

        assert main(["--input", str(request), "--breakdown"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["total"] == 34
        assert output["days"] == {"2023-02-01": 25, "2023-02-02": 9}
        assert output["breakdown"][0]["window_fees"] == [9, 16]

    def test_custom_policy_file(self, tmp_path, capsys):
        """Test --policy replaces the built-in tables."""
        custom = DEFAULT_POLICY.model_copy(update={"exempt_vehicle_types": frozenset({"Car"})})
        policy_path = PolicyLoader.save_to_json(custom, tmp_path / "policy.json")

        assert main(["--policy", str(policy_path), "--vehicle", "Car", "2023-02-01T07:30:00"]) == 0
        assert capsys.readouterr().out.strip() == "0"

    def test_no_chargeable_entries(self, capsys):
        """Test only toll-free entries exit with status 1."""
        assert main(["--vehicle", "Car", "2023-02-04T07:30:00"]) == 1
        assert "No chargeable entries" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "timestamp",
        ["not-a-date", "2023-02-01T07:30:00+01:00"],
    )
    def test_invalid_timestamps(self, timestamp, capsys):
        """Test malformed and timezone-aware timestamps exit with status 2."""
        assert main(["--vehicle", "Car", timestamp]) == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_missing_policy_file(self, tmp_path, capsys):
        """Test a missing policy file exits with status 2."""
        assert main(["--policy", str(tmp_path / "missing.json"), "2023-02-01T07:30:00"]) == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_breakdown_output_is_clean_json(self, tmp_path):
        """Test stdout holds only the JSON breakdown while logs go to stderr."""
        policy_path = PolicyLoader.save_to_json(DEFAULT_POLICY, tmp_path / "policy.json")

        result = subprocess.run(
            [
                sys.executable, str(PROJECT_ROOT / "app.py"),
                "--policy", str(policy_path),
                "--breakdown",
                "--vehicle", "Car",
                "2023-02-01T07:30:00",
            ],
            capture_output=True,
            text=True,
            cwd=PROJECT_ROOT,
            env={**os.environ, "LOG_LEVEL": "INFO"},
        )

        assert result.returncode == 0, result.stderr
        output = json.loads(result.stdout)
        assert output["total"] == 22
        assert "Loading toll policy" in result.stderr
