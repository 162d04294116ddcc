"""
Belote engine core
Cards and scoring, decks, trick resolution, legal moves, score ledger,
players, notifications and the round/turn state machine.
"""

from .card import Card, Rank, ScoringTable, Suit, better, point_value
from .deck import Deck, build_belote_deck
from .trick import Trick, TrickResult
from .legal_moves import legal_cards, overtrumps
from .score import RoundResult, ScoreLedger
from .enums import GamePhase, Seat, Team
from .player import HumanController, Player, PlayerKind, TurnController
from .bidding import BiddingResult, FixedTrumpChooser, RandomTrumpChooser, TrumpChooser
from .config import GameConfig
from .events import (
    CardPlayed, CardSelectionChanged, EventQueue, EventType, MatchEnded,
    RoundBoundary, RoundScored, TrickResolved, TurnChanged,
)
from .engine import GameEngine
from .exceptions import (
    CardNotFoundError, ConfigurationError, EmptyTrickError, GameError,
    GameStateError, IllegalPlayError, InsufficientCardsError,
    InvalidPhaseError, NoLegalMovesError,
)

__all__ = [
    # cards
    'Card', 'Rank', 'ScoringTable', 'Suit', 'better', 'point_value',
    'Deck', 'build_belote_deck',
    # tricks and rules
    'Trick', 'TrickResult', 'legal_cards', 'overtrumps',
    # scoring
    'RoundResult', 'ScoreLedger',
    # table
    'GamePhase', 'Seat', 'Team',
    'HumanController', 'Player', 'PlayerKind', 'TurnController',
    'BiddingResult', 'FixedTrumpChooser', 'RandomTrumpChooser', 'TrumpChooser',
    # engine
    'GameConfig', 'GameEngine',
    'CardPlayed', 'CardSelectionChanged', 'EventQueue', 'EventType', 'MatchEnded',
    'RoundBoundary', 'RoundScored', 'TrickResolved', 'TurnChanged',
    # errors
    'CardNotFoundError', 'ConfigurationError', 'EmptyTrickError', 'GameError',
    'GameStateError', 'IllegalPlayError', 'InsufficientCardsError',
    'InvalidPhaseError', 'NoLegalMovesError',
]

__version__ = '0.3.0'
