"""
Greed Referee.

Drives games with random dice and pluggable banking strategies.
"""

from src.referee.driver import Referee
from src.referee.strategies import AlwaysRollStrategy, BankingStrategy, ThresholdStrategy

__all__ = [
    "AlwaysRollStrategy",
    "BankingStrategy",
    "Referee",
    "ThresholdStrategy",
]
