"""Analysis tools for recorded bot decisions."""

from .decision_logger import DecisionLogger

__all__ = ["DecisionLogger"]
