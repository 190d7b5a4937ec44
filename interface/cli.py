"""Play against the engine in a terminal."""

import argparse
import sys

from laddermate.config import CONFIG
from laddermate.core.board import GameStatus
from laddermate.core.difficulty import Difficulty, UnknownDifficultyError
from laddermate.core.utils import setup_logging
from laddermate.main import Engine


def _difficulty(value: str) -> Difficulty:
    try:
        return Difficulty.parse(value)
    except UnknownDifficultyError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="laddermate", description="Play chess against LadderMate")
    parser.add_argument("--difficulty", "-d", type=_difficulty,
                        default=CONFIG.search.difficulty,
                        help="Beginner, Easy, Hard or Master (default: %(default)s)")
    parser.add_argument("--color", "-c", choices=["white", "black"], default="white",
                        help="side you play (default: %(default)s)")
    parser.add_argument("--fen", help="start from this position instead of the initial one")
    parser.add_argument("--two-player", action="store_true",
                        help="two people on one board, no engine replies")
    parser.add_argument("--serve", action="store_true",
                        help="run the REST API instead of a terminal game")
    return parser


def play(engine: Engine, read=input, write=print) -> str:
    """Run the game loop until it ends or the player quits. Returns the result."""
    board = engine.board
    while not board.is_game_over():
        if engine.engine_to_move():
            move = engine.play_engine_move()
            write(f"Engine plays: {move}")
            continue

        write(str(board.board))
        write("----------------------------")
        if board.status() == GameStatus.CHECK:
            write("Check!")
        try:
            command = read(f"{board.turn()} to move (uci, 'undo' or 'quit'): ").strip()
        except EOFError:
            command = "quit"

        if command == "quit":
            return "*"
        if command == "undo":
            if not engine.undo():
                write("Nothing to undo.")
            continue
        if not engine.make_move(command):
            write("Illegal move, try again.")

    write(str(board.board))
    write(f"Game Over: {board.status().value}")
    write(f"Result: {board.board.result()}")
    return board.board.result()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(CONFIG.log_level)

    if args.serve:
        from interface.api import run
        run()
        return 0

    try:
        engine = Engine(
            difficulty=args.difficulty,
            mode="local" if args.two_player else "ai",
            engine_color="black" if args.color == "white" else "white",
            fen=args.fen,
        )
    except ValueError as e:
        print(f"laddermate: {e}", file=sys.stderr)
        return 2
    play(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
