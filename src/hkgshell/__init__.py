"""hkgshell — native shell for the knowledge-graph desktop viewer."""

__version__ = "0.1.0"
