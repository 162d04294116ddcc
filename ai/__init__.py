"""
AI module
Automated players for the Belote engine.
"""

from .bot import AIBot
from .random_strategy import RandomStrategy
from .strategy import PlayStrategy

__all__ = ['AIBot', 'PlayStrategy', 'RandomStrategy']
