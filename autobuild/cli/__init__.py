"""autobuild CLI — Typer-based command-line interface.

Provides the ``autobuild`` command with subcommands for emitting a pipeline
definition, describing it, and previewing the archive location.

All human-facing output uses Rich.
"""
