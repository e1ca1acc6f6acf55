"""stackdiff: compare call-stack profiles against a baseline."""

__version__ = "1.0.0"
