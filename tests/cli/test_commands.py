"""Tests for the contract CLI commands."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(ROOT), *args],
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.mark.integration
def test_analyze_prints_normalized_contract():
    """analyze runs extraction and the pipeline."""
    result = run_cli("analyze", "Create a simple todo app.")

    assert result.returncode == 0, result.stderr
    contract = json.loads(result.stdout)
    assert contract["metadata"]["name"] == "TaskManager"
    assert contract["metadata"]["version"] == "1.0.0"


@pytest.mark.integration
def test_analyze_raw_skips_normalization():
    result = run_cli("analyze", "--raw", "Create a simple todo app.")

    assert result.returncode == 0, result.stderr
    assert "version" not in json.loads(result.stdout)["metadata"]


@pytest.mark.integration
def test_analyze_from_file(tmp_path, pothole_specification):
    spec_file = tmp_path / "spec.txt"
    spec_file.write_text(pothole_specification, encoding="utf-8")
    out_file = tmp_path / "contract.json"

    result = run_cli("analyze", "-f", str(spec_file), "-o", str(out_file))

    assert result.returncode == 0, result.stderr
    assert json.loads(out_file.read_text())["entities"][0]["name"] == "Report"


@pytest.mark.integration
def test_analyze_requires_text():
    assert run_cli("analyze").returncode == 1


@pytest.mark.integration
def test_validate_valid_file(tmp_path, valid_contract_dict):
    contract_file = tmp_path / "contract.json"
    contract_file.write_text(json.dumps(valid_contract_dict), encoding="utf-8")

    result = run_cli("validate", str(contract_file))

    assert result.returncode == 0, result.stderr
    assert [e["name"] for e in json.loads(result.stdout)["entities"]] == ["Project", "Task"]


@pytest.mark.integration
def test_validate_invalid_file(tmp_path, valid_contract_dict):
    del valid_contract_dict["metadata"]
    contract_file = tmp_path / "contract.json"
    contract_file.write_text(json.dumps(valid_contract_dict), encoding="utf-8")

    result = run_cli("validate", str(contract_file))

    assert result.returncode == 1
    assert "metadata: Field required" in result.stderr


@pytest.mark.integration
def test_schema_command():
    result = run_cli("schema")

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["title"] == "DesignContract"


@pytest.mark.integration
def test_unknown_command():
    assert run_cli("frobnicate").returncode == 1


@pytest.mark.integration
def test_validate_non_utf8_file(tmp_path):
    """Undecodable files are reported instead of raising."""
    contract_file = tmp_path / "contract.json"
    contract_file.write_bytes(b"\xff\xfe{}")

    result = run_cli("validate", str(contract_file))

    assert result.returncode == 1
    assert "Could not load contract" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.integration
def test_analyze_non_utf8_file(tmp_path):
    spec_file = tmp_path / "spec.txt"
    spec_file.write_bytes(b"\xff\xfeCreate a todo app.")

    result = run_cli("analyze", "-f", str(spec_file))

    assert result.returncode == 1
    assert "Could not read specification" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.integration
def test_unwritable_output_path(tmp_path):
    """Failures while writing output end the command with exit code 1."""
    out_file = tmp_path / "missing" / "schema.json"

    result = run_cli("schema", "-o", str(out_file))

    assert result.returncode == 1
    assert "schema failed" in result.stderr
    assert "Traceback" not in result.stderr
