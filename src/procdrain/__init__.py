try:
    from importlib.metadata import version

    __version__ = version("procdrain")
except Exception:
    __version__ = "0.0.0"

from procdrain.drain import DrainResult, StreamDrain, drain
from procdrain.errors import DrainError, ProcdrainError, SpawnError, WaitError
from procdrain.process import ChildProcess, Result, run, spawn

__all__ = [
    "ChildProcess",
    "DrainError",
    "DrainResult",
    "ProcdrainError",
    "Result",
    "SpawnError",
    "StreamDrain",
    "WaitError",
    "drain",
    "run",
    "spawn",
]
