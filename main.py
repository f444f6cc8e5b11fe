"""
Puzzle Runner - Entry Point

Loads a day's puzzle input, runs its solver and prints both answers.

Example:
    python main.py 7
    python main.py 3 --input my_input.txt --part 2
    python main.py 4 --animate  # Print every animation step
    python main.py --list
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from puzzles.solver import (
    DaySolver,
    PuzzleInputError,
    create_solver,
    get_solver_info,
)
from puzzles.settings import load_settings, save_settings, input_path


# Configure logging - output to both console and file
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(),  # Console output
        logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
    ]
)
logger = logging.getLogger(__name__)


class PuzzleRunner:
    """
    Runs one day's solver against an input file.

    Resolves the solver through the registry, reads the input and
    prints answers (and animation steps when requested).
    """

    def __init__(self, day: Optional[int] = None, debug_mode: bool = False):
        """
        Initialize the runner.

        Args:
            day: Puzzle day; falls back to the last day run
            debug_mode: Enable debug logging via CLI (overrides saved setting)
        """
        # Load persistent settings
        self.settings: Dict[str, Any] = load_settings()

        self.day = day if day is not None else self.settings.get("last_day", 1)
        self.debug_mode = debug_mode or self.settings.get("debug_enabled", False)
        self.solver: Optional[DaySolver] = None

    def setup(self):
        """Resolve the solver and apply the log level."""
        if self.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)
            logger.debug("Debug logging enabled")

        self.solver = create_solver(self.day)
        logger.info(f"Day {self.day}: {self.solver.title}")

    def run(self, path: Optional[Path] = None, parts: Sequence[int] = (1, 2), animate: bool = False) -> int:
        """
        Solve the requested parts.

        Args:
            path: Input file (default: settings input_dir/dayNN.txt)
            parts: Parts to solve
            animate: Print animation steps as they are reported

        Returns:
            Exit code
        """
        path = path or input_path(self.settings, self.day)
        logger.debug(f"Reading input from {path}")
        text = path.read_text(encoding='utf-8')

        for part in parts:
            if animate:
                answer = self.solver.solve_part(
                    text, part, self._print_step, max_steps=self.settings.get("max_steps", 200)
                )
            elif part == 1:
                answer = self.solver.part1(text)
            else:
                answer = self.solver.part2(text)
            print(f"Part {part}: {answer}")

        # Remember the day for the next run
        self.settings["last_day"] = self.day
        save_settings(self.settings)
        return 0

    @staticmethod
    def _print_step(description: str, lines: List[str], value: int):
        """Print one animation step to the console."""
        print(f"-- {description} [{value}]")
        for line in lines:
            print(f"   {line}")


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Holiday puzzle solvers - prints Part 1 and Part 2 answers"
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        help="Puzzle day (default: last day run)"
    )
    parser.add_argument(
        "--input", "-i",
        type=Path,
        help="Input file (default: inputs/dayNN.txt)"
    )
    parser.add_argument(
        "--part", "-p",
        type=int,
        choices=(1, 2),
        help="Solve only one part"
    )
    parser.add_argument(
        "--animate", "-a",
        action="store_true",
        help="Print animation steps while solving"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available solvers and exit"
    )
    return parser.parse_args()


def main():
    """Parse arguments and run the requested solver."""
    args = parse_args()

    if args.list:
        for info in get_solver_info():
            print(f"Day {info['day']:2d}  {info['title']:<20} {info['description']}")
        sys.exit(0)

    runner = PuzzleRunner(day=args.day, debug_mode=args.debug)
    parts = [args.part] if args.part else [1, 2]
    animate = args.animate or runner.settings.get("animate", False)

    try:
        runner.setup()
        exit_code = runner.run(path=args.input, parts=parts, animate=animate)
    except PuzzleInputError as e:
        logger.error(f"Malformed input: {e}")
        exit_code = 1
    except ValueError as e:
        logger.error(str(e))
        exit_code = 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
