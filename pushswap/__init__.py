"""Sort integers on two stacks with a restricted set of instructions."""

__version__ = "0.1.0"