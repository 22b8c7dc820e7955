"""Regular-expression matching with Thompson's NFA construction, with an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["nfa", "cli"]