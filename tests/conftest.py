"""Shared test fixtures."""

import sys

import pytest


@pytest.fixture
def python_cmd():
    """Build a command that runs a Python snippet in a child interpreter."""

    def build(code: str) -> list[str]:
        return [sys.executable, "-c", code]

    return build


@pytest.fixture
def mock_run(monkeypatch):
    """Mock process.run for CLI tests."""
    from procdrain import process
    from procdrain.drain import DrainResult

    calls = []
    responses = []

    def fake_run(args, env=None, cwd=None, encoding=None):
        calls.append((args, env, cwd, encoding))
        if responses:
            response = responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return process.Result(
            returncode=0,
            stdout=DrainResult(name="stdout", text=""),
            stderr=DrainResult(name="stderr", text=""),
        )

    monkeypatch.setattr(process, "run", fake_run)

    return type("MockRun", (), {"calls": calls, "responses": responses})()
