from __future__ import annotations

import os
import platform
import sys
from pprint import pformat
from typing import Any


__all__ = (
    "ngettext",
    "display_platform",
    "dump",
)


def ngettext(predicate: bool, if_true: str, if_false: str, /) -> str:
    return if_true if predicate else if_false


def display_platform() -> None:
    cpu_count = os.cpu_count() or 1

    display = f"Running on {sys.platform} with {cpu_count} " + ngettext(cpu_count == 1, "CPU", "CPUs") + "\n"
    display += f"Python {sys.version}\n"
    display += ", ".join((platform.platform(), platform.processor())) + "\n"
    display += "-" * 30

    print(display)


def dump(title: str, value: Any, /) -> None:
    """Pretty-print a diagnostic structure under a title line"""
    print(f"{title}:\n{pformat(value, sort_dicts=False)}")
