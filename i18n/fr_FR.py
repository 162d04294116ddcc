"""Table de traduction française."""

STRINGS: dict[str, str] = {
    # ── exceptions ──
    "exc.game_error": "Erreur de jeu",
    "exc.config_error": "Configuration de partie invalide",
    "exc.insufficient_cards": "Cartes insuffisantes : {required} demandées, {available} disponibles",
    "exc.card_not_found": "La carte {card} n'est pas dans {owner}",
    "exc.empty_trick": "Impossible de résoudre un pli vide",
    "exc.no_legal_moves": "{seat} n'a aucune carte jouable",
    "exc.illegal_play": "Coup illégal",
    "exc.illegal_play.not_your_turn": "Ce n'est pas le tour de {seat}",
    "exc.illegal_play.not_legal": "{card} n'est pas jouable pour {seat}",
    "exc.illegal_play.play_pending": "Un coup est encore en cours de résolution",
    "exc.game_state": "Opération interdite dans l'état actuel de la partie",
    "exc.invalid_phase": "Opération interdite dans la phase actuelle",
    "exc.invalid_transition": "Transition de phase invalide : {current} -> {target}",
    "exc.trump_locked": "L'atout ne peut plus changer une fois un pli remporté",
    "exc.round_in_progress": "La donne n'est pas terminée",
    "exc.match_started": "La partie a déjà commencé",

    # ── couleurs ──
    "suit.spades": "Pique",
    "suit.hearts": "Cœur",
    "suit.diamonds": "Carreau",
    "suit.clubs": "Trèfle",

    # ── valeurs ──
    "rank.seven": "7",
    "rank.eight": "8",
    "rank.nine": "9",
    "rank.ten": "10",
    "rank.jack": "Valet",
    "rank.queen": "Dame",
    "rank.king": "Roi",
    "rank.ace": "As",
    "card.display": "{rank} de {suit}",

    # ── places / équipes ──
    "seat.south": "Sud",
    "seat.west": "Ouest",
    "seat.north": "Nord",
    "seat.east": "Est",
    "team.team1": "Nord-Sud",
    "team.team2": "Est-Ouest",

    # ── hôte ──
    "host.title": "Belote - partie automatique",
    "host.round_title": "Donne {index} (atout : {trump}, donneur : {dealer})",
    "host.col_team": "Équipe",
    "host.col_round": "Points de la donne",
    "host.col_bonus": "Dix de der",
    "host.col_total": "Total",
    "host.round_winner": "Donne remportée par {team}",
    "host.round_tie": "Égalité, la donne revient au preneur {team}",
    "host.final": "Score final après {rounds} donne(s)",
}
