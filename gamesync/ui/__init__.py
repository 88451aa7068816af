"""
Terminal output and input.

Colors, the Reporter event sink and the prompt flows built on an
injectable `ask` input port.
"""

from .colors import Colors, colorize, rgb
from .reporter import ConsoleReporter, RecordingReporter, Reporter
from .prompts import (
    ACTION_CREATE,
    ACTION_KEEP,
    ACTION_SELECT,
    Ask,
    CancelInput,
    ask_until_valid,
    choose_from_list,
    choose_startup_action,
    confirm,
    scripted_ask,
    terminal_ask,
)
from .header import print_header

__all__ = [
    # Colors
    "Colors",
    "colorize",
    "rgb",
    # Reporters
    "Reporter",
    "ConsoleReporter",
    "RecordingReporter",
    # Prompts
    "ACTION_CREATE",
    "ACTION_KEEP",
    "ACTION_SELECT",
    "Ask",
    "CancelInput",
    "ask_until_valid",
    "choose_from_list",
    "choose_startup_action",
    "confirm",
    "scripted_ask",
    "terminal_ask",
    # Header
    "print_header",
]
