"""Workspace operations behind the CLI subcommands.

- **planner**: ``new`` -- shift dynamic workspaces and create one at a position
- **locator**: ``find`` -- name of the workspace at a position relative to the active one
"""
