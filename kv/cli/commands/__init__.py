"""
kv.cli.commands

One module per subcommand. Each exposes register(sub) and a _run(args) -> int.
Registration order is the order complete-commands reports.
"""
__all__ = [
    "delete_cmd",
    "get_cmd",
    "list_cmd",
    "set_cmd",
    "complete_cmd",
]
