"""Runtime support for smart type optimisation: checked int64 arithmetic, big decimals, small strings, literal inference and typed containers."""

__version__ = "0.1.0"