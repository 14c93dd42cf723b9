from __future__ import annotations

import argparse
from typing import List, Optional, Tuple


def _subparsers_action(parser: argparse.ArgumentParser) -> Optional[argparse._SubParsersAction]:
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action
    return None


def command_descriptions(parser: argparse.ArgumentParser) -> List[Tuple[str, str]]:
    """(name, description) for every discoverable subcommand, in registration order."""
    action = _subparsers_action(parser)
    if action is None:
        return []

    out: List[Tuple[str, str]] = []
    for choice in action._choices_actions:
        name = str(choice.dest)
        if name.startswith("complete") or not choice.help:
            continue
        out.append((name, str(choice.help)))
    return out


def complete_commands(parser: argparse.ArgumentParser) -> str:
    return "\n".join(f"{name}:{desc}" for name, desc in command_descriptions(parser))
