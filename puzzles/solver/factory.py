"""
Solver Factory Module - Registry and factory for daily solvers.
"""

from typing import Any, Dict, List, Type

from .base import DaySolver


# Global registry of solvers, keyed by day
_SOLVERS: Dict[int, Type[DaySolver]] = {}


def register_solver(cls: Type[DaySolver]) -> Type[DaySolver]:
    """
    Decorator to register a solver class under its day number.

    Usage:
        @register_solver
        class MySolver(DaySolver):
            day = 8
            ...

    Args:
        cls: Solver class to register

    Returns:
        The same class (for decorator chaining)

    Raises:
        ValueError: If another solver already claimed the day
    """
    existing = _SOLVERS.get(cls.day)
    if existing is not None and existing is not cls:
        raise ValueError(f"Day {cls.day} already registered by {existing.__name__}")
    _SOLVERS[cls.day] = cls
    return cls


def create_solver(day: int, **kwargs: Any) -> DaySolver:
    """
    Create a solver instance by day.

    Args:
        day: Puzzle day number
        **kwargs: Additional arguments passed to solver constructor

    Returns:
        Solver instance

    Raises:
        ValueError: If no solver is registered for the day
    """
    if day not in _SOLVERS:
        available = ", ".join(str(d) for d in sorted(_SOLVERS))
        raise ValueError(f"Unknown day: {day}. Available: {available}")
    return _SOLVERS[day](**kwargs)


def get_solver_days() -> List[int]:
    """
    Get the sorted list of registered days.

    Returns:
        List of day numbers
    """
    return sorted(_SOLVERS)


def get_solver_info() -> List[Dict[str, Any]]:
    """
    Get day, title and description for all registered solvers.

    Returns:
        List of dicts with 'day', 'title' and 'description' keys
    """
    return [
        {"day": day, "title": _SOLVERS[day].title, "description": _SOLVERS[day].description}
        for day in sorted(_SOLVERS)
    ]
