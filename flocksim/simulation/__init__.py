"""
Simulation module containing the headless runner and the interactive viewer.
"""

from .headless import HeadlessRun

__all__ = ['HeadlessRun']
