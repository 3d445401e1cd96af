"""
CLI Module - Interactive Session
================================
click-based prompts that collect a watermark request and run it.

Components:
- main: click command, the process entry point
- InputCollector: prompt sequence and session state machine
- Prompter: thin wrapper over click prompts
"""

from .app import main
from .paths import derive_output_filename, find_missing
from .prompts import Prompter
from .session import InputCollector, SessionState

__all__ = [
    "main",
    "InputCollector",
    "SessionState",
    "Prompter",
    "derive_output_filename",
    "find_missing",
]
