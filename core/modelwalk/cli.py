"""
Command line interface for running walks over JSON model documents.
"""

from __future__ import annotations

import argparse
import logging
import sys

from modelwalk.evaluator import available_languages
from modelwalk.generator import NoPathFoundError, RandomPath
from modelwalk.machine import ContextConfig, ExecutionContext, MachineError, Walker
from modelwalk.model import ModelBuildError, load_model

logger = logging.getLogger(__name__)


def register_run_command(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``run`` command."""
    run_parser = subparsers.add_parser(
        "run",
        help="Walk a model randomly and print the visited path as JSON",
    )
    run_parser.add_argument(
        "model_path",
        help="Path to a JSON model document",
    )
    run_parser.add_argument(
        "--max-steps",
        "-n",
        type=int,
        default=100,
        help="Number of steps after which the walk stops (default: 100)",
    )
    run_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible walk",
    )
    run_parser.add_argument(
        "--language",
        default="python",
        choices=available_languages(),
        help="Script language of guards and actions",
    )
    run_parser.set_defaults(func=cmd_run)


def cmd_run(args: argparse.Namespace) -> int:
    """Run a random walk over the given model."""
    try:
        model = load_model(args.model_path)
        context = ExecutionContext(
            model,
            RandomPath(max_steps=args.max_steps, seed=args.seed),
            config=ContextConfig(script_language=args.language),
        )
        result = Walker(context).run()
    except FileNotFoundError:
        print(f"Model file not found: {args.model_path}", file=sys.stderr)
        return 1
    except ModelBuildError as e:
        print(f"Invalid model: {e}", file=sys.stderr)
        return 1
    except (MachineError, NoPathFoundError, ValueError) as e:
        print(f"Walk failed: {e}", file=sys.stderr)
        return 2

    print(result.model_dump_json(indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modelwalk", description="Model-based path generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)
    register_run_command(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)
