"""Deterministic Dirac dice.

Players take turns rolling a deterministic die ``rolls_per_turn`` times and
moving their pawn that many spaces around a circular board numbered
``1..board_size``. The space landed on is added to the player's score, and
the game ends as soon as any score reaches ``target_score``; the other
players get no final move.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent import pvector

from grid_enhance.components import Die, Player
from grid_enhance.config import DiceConfig
from grid_enhance.dice.state import DiceGame

logger = logging.getLogger(__name__)


def roll(die: Die, times: int, sides: int = 100) -> Tuple[int, Die]:
    """Roll ``die`` ``times`` times.

    Returns:
        Tuple[int, Die]: Sum of the rolled values and the advanced die.
    """
    value = 0
    next_value = die.next_value
    for _ in range(times):
        value += next_value
        next_value = next_value % sides + 1
    return value, Die(next_value=next_value, rolls=die.rolls + times)


def move(player: Player, roll_sum: int, board_size: int = 10) -> Player:
    """Advance ``player`` by ``roll_sum`` spaces and score the landing space."""
    space = (player.space - 1 + roll_sum) % board_size + 1
    return Player(space=space, score=player.score + space)


def new_game(starts: Tuple[int, ...], config: DiceConfig) -> DiceGame:
    """Create a game with one player per start space, all scores zero.

    Raises:
        ValueError: If ``starts`` is empty or a start is not on the board.
    """
    if not starts:
        raise ValueError("at least one start space is required")
    for start in starts:
        if not 1 <= start <= config.board_size:
            raise ValueError(
                f"start space must be in [1, {config.board_size}], got {start}"
            )
    return DiceGame(players=pvector(Player(space=start) for start in starts))


def is_game_over(game: DiceGame, config: DiceConfig) -> bool:
    return any(player.score >= config.target_score for player in game.players)


def turn_step(game: DiceGame, config: DiceConfig) -> DiceGame:
    """Play one turn for the active player and pass the turn on."""
    roll_sum, die = roll(game.die, config.rolls_per_turn, config.die_sides)
    player = move(game.players[game.turn], roll_sum, config.board_size)
    return replace(
        game,
        players=game.players.set(game.turn, player),
        die=die,
        turn=(game.turn + 1) % len(game.players),
    )


def play_dirac_dice_deterministic(
    player1_start: int, player2_start: int, config: Optional[DiceConfig] = None
) -> int:
    """Play a full game and return losing score times total die rolls."""
    if config is None:
        config = DiceConfig()

    game = new_game((player1_start, player2_start), config)
    while not is_game_over(game, config):
        game = turn_step(game, config)

    losing_score = min(player.score for player in game.players)
    logger.debug(
        "dice game over after %d rolls, scores %s",
        game.die.rolls,
        [player.score for player in game.players],
    )
    return losing_score * game.die.rolls
