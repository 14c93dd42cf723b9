from __future__ import annotations

import argparse


def key_arg(text: str) -> str:
    """argparse type for <key>: keys are non-empty strings."""
    if text == "":
        raise argparse.ArgumentTypeError("key must not be empty")
    return text
