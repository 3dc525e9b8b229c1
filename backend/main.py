import argparse
import json
import logging
import random
from typing import Any, Dict

from config import load_settings
from domain.topology import WrapAxis
from players.variant_registry import AVAILABLE_PLAYERS, get_player_class
from session import HexSnakeSession

logger = logging.getLogger(__name__)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs a single headless HexSnake game steered by an automated pilot.

    Args:
        game_params: An object (like argparse.Namespace) containing game settings
                     (ticks, seed, axis, player, save, show_board, output_dir).

    Returns:
        A dictionary summarizing the game (game_id, axis, final_score, ticks, ...).
    """
    seed = getattr(game_params, 'seed', None)
    rng = random.Random(seed)

    axis_name = getattr(game_params, 'axis', None)
    axis = WrapAxis.from_name(axis_name) if axis_name else None

    session = HexSnakeSession(rng=rng, axis=axis)
    player = get_player_class(getattr(game_params, 'player', None))(rng=rng)

    session.start()
    final_state = session.run(
        max_ticks=game_params.ticks,
        player=player,
        sleep=getattr(game_params, 'realtime', False),
    )

    if getattr(game_params, 'show_board', False):
        print("\n" + final_state.print_board() + "\n")

    result = session.summary()
    if getattr(game_params, 'save', False):
        result["replay_path"] = session.save_history_to_json(game_params.output_dir)

    return result


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Run a headless HexSnake game with an automated pilot."
    )
    parser.add_argument("--ticks", type=int, required=False, default=500,
                        help="Maximum number of ticks to play")
    parser.add_argument("--seed", type=int, required=False, default=settings.seed,
                        help="Random seed for the axis choice, food and pilot")
    parser.add_argument("--axis", type=str, required=False, default=settings.axis,
                        choices=[a.value for a in WrapAxis],
                        help="Fix the portal axis instead of picking one at random")
    parser.add_argument("--player", type=str, required=False, default="greedy",
                        choices=AVAILABLE_PLAYERS,
                        help="Pilot that steers the snake")
    parser.add_argument("--save", action="store_true",
                        help="Write the replay JSON to the completed games directory")
    parser.add_argument("--output_dir", type=str, required=False, default=settings.completed_games_dir,
                        help="Directory for replay files")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the final board for the displayed face")
    parser.add_argument("--realtime", action="store_true",
                        help="Sleep one tick interval between ticks")

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
