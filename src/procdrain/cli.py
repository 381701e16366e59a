"""Click entry point — all commands."""

import codecs
import shlex
import signal
import sys
import time

import click

from procdrain import __version__, log, process, report
from procdrain.errors import SpawnError, WaitError


def _parse_env(ctx, param, value):
    env = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        env[key] = val
    return env or None


def _check_encoding(ctx, param, value):
    if value is None:
        return None
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"unknown encoding {value!r}") from None
    return value


def _exit_status(returncode: int) -> int:
    """Map a child's return code to one this process can exit with."""
    if returncode < 0:
        # Killed by signal, report it the way a shell would
        return 128 + abs(returncode)
    return returncode


def _describe(returncode: int) -> str:
    if returncode >= 0:
        return f"exit code {returncode}"
    try:
        return f"killed by {signal.Signals(-returncode).name}"
    except ValueError:
        return f"killed by signal {-returncode}"


@click.group()
@click.version_option(version=__version__, prog_name="procdrain")
def main():
    """Run a process and capture its stdout and stderr without deadlocking."""


@main.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
@click.option(
    "--cwd", default=None, type=click.Path(file_okay=False), help="Working directory for the child"
)
@click.option(
    "--env",
    "env",
    multiple=True,
    callback=_parse_env,
    metavar="KEY=VALUE",
    help="Extra environment variable for the child (repeatable)",
)
@click.option(
    "--encoding",
    default=None,
    callback=_check_encoding,
    help="Decode output with this encoding (default: locale)",
)
@click.option("--format", "fmt", type=click.Choice(report.FORMATS), default="text", help="Report format")
@click.option("--propagate-exit", is_flag=True, help="Exit with the child's exit code")
@click.option("--verbose", "-v", is_flag=True, help="Log the command and its duration")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
def run(cwd, env, encoding, fmt, propagate_exit, verbose, command):
    """Run COMMAND with its arguments taken literally, and report its output."""
    args = list(command)
    if verbose:
        log.info(f"$ {shlex.join(args)}")

    start_time = time.monotonic()
    try:
        result = process.run(args, env=env, cwd=cwd, encoding=encoding)
    except (SpawnError, WaitError) as e:
        log.error(str(e))
        sys.exit(1)

    if verbose:
        elapsed = time.monotonic() - start_time
        log.step(f"{_describe(result.returncode)} after {elapsed:.2f}s")

    text = report.render(result, fmt)
    click.echo(text, nl=not text.endswith("\n"))

    if propagate_exit:
        sys.exit(_exit_status(result.returncode))


if __name__ == "__main__":
    main()
