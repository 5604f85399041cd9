"""Shared fixtures: the nominal pump, pipe and tank, and a clean loguru setup per test."""

import os
import sys

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from loguru import logger

from tankfill.units.pipes import Pipe
from tankfill.units.pump import Pump
from tankfill.units.tank import Tank


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture()
def pump() -> Pump:
    return Pump(flow_rate=0.01, head=10.0)


@pytest.fixture()
def pipe() -> Pipe:
    return Pipe(length=50.0, diameter=0.1, roughness=0.015, density=1000.0)


@pytest.fixture()
def tank() -> Tank:
    return Tank(height=5.0, radius=1.0, water_level=0.0)


@pytest.fixture()
def small_tank() -> Tank:
    return Tank(height=5.0, radius=0.05, water_level=0.0)
