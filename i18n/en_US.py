"""English translation table."""

STRINGS: dict[str, str] = {
    # ── exceptions ──
    "exc.game_error": "Game error",
    "exc.config_error": "Invalid game configuration",
    "exc.insufficient_cards": "Not enough cards: {required} required, {available} available",
    "exc.card_not_found": "Card {card} is not in {owner}",
    "exc.empty_trick": "Cannot resolve an empty trick",
    "exc.no_legal_moves": "{seat} has no legal card to play",
    "exc.illegal_play": "Illegal play",
    "exc.illegal_play.not_your_turn": "{seat} does not hold the turn",
    "exc.illegal_play.not_legal": "{card} is not a legal card for {seat}",
    "exc.illegal_play.play_pending": "A play is still being resolved",
    "exc.game_state": "Operation not allowed in the current game state",
    "exc.invalid_phase": "Operation not allowed in the current phase",
    "exc.invalid_transition": "Invalid phase transition: {current} -> {target}",
    "exc.trump_locked": "Trump can no longer change once a trick has been won",
    "exc.round_in_progress": "The round still has cards to play",
    "exc.match_started": "The match has already started",

    # ── suits ──
    "suit.spades": "Spades",
    "suit.hearts": "Hearts",
    "suit.diamonds": "Diamonds",
    "suit.clubs": "Clubs",

    # ── ranks ──
    "rank.seven": "7",
    "rank.eight": "8",
    "rank.nine": "9",
    "rank.ten": "10",
    "rank.jack": "Jack",
    "rank.queen": "Queen",
    "rank.king": "King",
    "rank.ace": "Ace",
    "card.display": "{rank} of {suit}",

    # ── seats / teams ──
    "seat.south": "South",
    "seat.west": "West",
    "seat.north": "North",
    "seat.east": "East",
    "team.team1": "North-South",
    "team.team2": "East-West",

    # ── host ──
    "host.title": "Belote - automated match",
    "host.round_title": "Round {index} (trump: {trump}, dealer: {dealer})",
    "host.col_team": "Team",
    "host.col_round": "Round points",
    "host.col_bonus": "Last trick",
    "host.col_total": "Match total",
    "host.round_winner": "Round won by {team}",
    "host.round_tie": "Tie, round goes to the bidding team {team}",
    "host.final": "Final score after {rounds} round(s)",
}
