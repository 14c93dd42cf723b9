"""
kv.cli

Entry point: kv.cli.main:main (also `python -m kv`).
"""
