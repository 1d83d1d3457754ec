"""Constraint implementations.

This module provides the constraint base class and the built-in string and
number constraints.
"""

from cinputs.constraints.base import BaseConstraint
from cinputs.constraints.basic import (
    Constraint,
    NumberConstraint,
    StringConstraint,
    load_constraint,
)

__all__ = [
    "BaseConstraint",
    "Constraint",
    "NumberConstraint",
    "StringConstraint",
    "load_constraint",
]
