"""Unit models for tankfill."""

from .pump import Pump
from .pipes import Pipe
from .tank import Tank, StepOutcome, step

__all__ = ["Pump", "Pipe", "Tank", "StepOutcome", "step"]
