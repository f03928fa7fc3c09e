"""Sort integers with two stacks and a restricted instruction set, plus small string, memory and I/O helpers."""

__version__ = "0.1.0"