import json

import pytest

from assignment1 import cli, verify

def test_demo(capsys):
    assert cli.main(["demo"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1", "true", "false"]

def test_count(capsys):
    assert cli.main(["count", "Typescript is great, I love TypeScript", "typescript"]) == 0
    assert capsys.readouterr().out.strip() == "2"

def test_validate(capsys):
    record = json.dumps({"name": "Alice", "age": 25})
    assert cli.main(["validate", "--record", record, "name", "age"]) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert cli.main(["validate", "--record", record, "name", "address"]) == 0
    assert capsys.readouterr().out.strip() == "false"

def test_validate_bad_json(capsys):
    assert cli.main(["validate", "--record", "{name", "name"]) == 2
    assert "not valid JSON" in capsys.readouterr().err

def test_validate_non_object(capsys):
    assert cli.main(["validate", "--record", "[1, 2]", "name"]) == 2
    assert "JSON object" in capsys.readouterr().err

def test_check_unknown_task(capsys):
    assert cli.main(["check", "--task", "nope"]) == 2
    assert "unknown task" in capsys.readouterr().err

def test_check_task(monkeypatch, capsys):
    monkeypatch.setattr(verify, "run_tests", lambda tests, timeout_s=5, root=None: {
        "passed": 2, "failed": 0, "total": 2, "pass_frac": 1.0, "returncode": 0, "stdout": ""})
    assert cli.main(["check", "--task", "problem-8"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["name"] == "validate_keys" and out["passed"] is True

def test_missing_subcommand():
    with pytest.raises(SystemExit) as e:
        cli.main([])
    assert e.value.code == 2
