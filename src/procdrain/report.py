"""Render a capture Result for people (text) or tools (YAML)."""

import yaml

from procdrain.drain import DrainResult
from procdrain.process import Result

FORMATS = ("text", "yaml")


def _describe_error(error) -> str:
    cause = error.cause
    return f"{type(cause).__name__}: {cause}"


def _stream_section(result: DrainResult) -> str:
    if result.error is not None:
        return f"Could not read {result.name}: {_describe_error(result.error)}"
    return f"Contents of {result.name}: {result.text}"


def render_text(result: Result) -> str:
    """Exit code first, then each stream or the error that stopped it."""
    return "\n".join(
        [
            f"Exit code = {result.returncode}",
            _stream_section(result.stdout),
            _stream_section(result.stderr),
        ]
    )


def _error_text(result: DrainResult) -> str | None:
    return None if result.error is None else _describe_error(result.error)


def render_yaml(result: Result) -> str:
    doc = {
        "exit_code": result.returncode,
        "stdout": result.stdout.text,
        "stdout_error": _error_text(result.stdout),
        "stderr": result.stderr.text,
        "stderr_error": _error_text(result.stderr),
    }
    return yaml.safe_dump(doc, sort_keys=False, allow_unicode=True)


def render(result: Result, fmt: str = "text") -> str:
    if fmt == "text":
        return render_text(result)
    if fmt == "yaml":
        return render_yaml(result)
    raise ValueError(f"Unknown report format: {fmt}")
