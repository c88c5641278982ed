"""Main entry point: run a headless Game of Life simulation."""
import argparse
import logging
import sys

from .core.errors import LifeError
from .core.kernels import EdgePolicy
from .core.life_engine import BACKENDS, LifeEngine
from .core.patterns import pattern_names, place
from .utils.config import Config

LOG = logging.getLogger('golife')


def setup_logging(verbose: bool = False) -> None:
    """Attach a console handler to the package logger."""
    LOG.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not LOG.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        LOG.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='golife', description="Run Conway's Game of Life without a display.")
    parser.add_argument('--cols', type=int, default=Config.DEFAULT_FIELD_WIDTH, help='field width in cells')
    parser.add_argument('--rows', type=int, default=Config.DEFAULT_FIELD_HEIGHT, help='field height in cells')
    parser.add_argument('--seed', type=int, default=None, help='random seed (default: fresh entropy)')
    parser.add_argument('--density', type=float, default=Config.INITIAL_DENSITY,
                        help='probability of a cell starting alive')
    parser.add_argument('--edge', choices=[p.name.lower() for p in EdgePolicy],
                        default=Config.DEFAULT_EDGE_POLICY, help='edge policy')
    parser.add_argument('--backend', choices=BACKENDS, default=Config.DEFAULT_BACKEND, help='array backend')
    parser.add_argument('--generations', type=int, default=Config.DEFAULT_GENERATIONS,
                        help='number of generations to run')
    parser.add_argument('--pattern', choices=pattern_names(), default=None,
                        help='start from a built-in pattern centered on the field instead of random cells')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every generation')
    return parser


def main(argv=None) -> int:
    """Run the simulation and log population statistics."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.pattern:
            grid = place(args.pattern, args.cols, args.rows)
            engine = LifeEngine.from_pattern(grid, edge_policy=args.edge, backend=args.backend)
        else:
            engine = LifeEngine(args.cols, args.rows, seed=args.seed, density=args.density,
                                edge_policy=args.edge, backend=args.backend)
        initial = engine.population
        engine.step(args.generations)
    except (LifeError, ValueError, RuntimeError) as e:
        LOG.error(str(e))
        return 1

    LOG.info(f"Generation {engine.generation}: population {initial} -> {engine.population} "
             f"on a {engine.cols}x{engine.rows} {engine.edge_policy.name.lower()} field")
    return 0


if __name__ == "__main__":
    sys.exit(main())
