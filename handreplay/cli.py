"""
CLI runner for hand parsing, replay and equity
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import get_config
from .equity import calculate_equity
from .parse.runner import parse_file
from .replay import build_snapshots
from .replay.descriptions import format_amount

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration"""
    cfg = get_config()['logging']
    level = logging.DEBUG if verbose else getattr(logging, str(cfg['level']).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=cfg['format'],
        datefmt=cfg['datefmt'],
    )


def _print_warnings(result) -> None:
    for warning in result.warnings:
        print(f"  ! {warning}")


def cmd_parse(args) -> int:
    result = parse_file(args.file)
    if not result.ok:
        print(f"Error: {result.error}")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"Parsed {len(result.value)} hands from {args.file}")
    for hand in result.value:
        kind = f"Tournament #{hand.tournament_id}" if hand.game_context.is_tournament else (hand.stakes or "cash")
        winners = ', '.join(hand.winners) or '-'
        print(f"  {hand.site:<11} #{hand.hand_id}  {kind}  {len(hand.players)} players  winners: {winners}")
    _print_warnings(result)
    return 0


def cmd_replay(args) -> int:
    parsed = parse_file(args.file)
    if not parsed.ok:
        print(f"Error: {parsed.error}")
        return 1
    if not parsed.value:
        print("Error: no hands parsed")
        return 1
    if not 0 <= args.hand < len(parsed.value):
        print(f"Error: hand index {args.hand} out of range (0-{len(parsed.value) - 1})")
        return 1

    hand = parsed.value[args.hand]
    result = build_snapshots(hand)
    if not result.ok:
        print(f"Error: {result.error}")
        return 1

    replay = result.value
    for snap in replay.snapshots:
        pots = ' + '.join(format_amount(p.amount, replay.unit) for p in snap.pots) or '0'
        print(f"[{snap.id:>3}] {snap.street:<8} {snap.description}")
        print(f"        pot {pots} (total {format_amount(snap.total_displayed_pot, replay.unit)})")
        stacks = ', '.join(f"{name} {format_amount(snap.player_stacks[name], replay.unit)}" for name in snap.players_order)
        print(f"        stacks {stacks}")
    _print_warnings(result)
    return 0


def cmd_equity(args) -> int:
    result = calculate_equity(args.hero, args.villain, args.board, args.iterations, seed=args.seed)
    if result is None:
        print("Error: invalid cards")
        return 1

    print(f"Street: {result.street} ({result.iterations} iterations{', truncated' if result.truncated else ''})")
    print(f"  Hero    {' '.join(result.hero_hand)}: {result.hero_equity:.2f}%")
    print(f"  Villain {' '.join(result.villain_hand)}: {result.villain_equity:.2f}%")
    print(f"  Tie: {result.tie_equity:.2f}%")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="handreplay", description="Parse, replay and evaluate poker hands")
    parser.add_argument("-c", "--config", help="Config file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Split and parse a hand history file")
    p.add_argument("file", help="Hand history file")
    p.add_argument("--json", action="store_true", help="Print the parsed hands as JSON")
    p.set_defaults(func=cmd_parse)

    r = sub.add_parser("replay", help="Print the replay frames of one hand")
    r.add_argument("file", help="Hand history file")
    r.add_argument("--hand", type=int, default=0, help="Index of the hand in the file")
    r.set_defaults(func=cmd_replay)

    e = sub.add_parser("equity", help="Monte Carlo equity of two hands")
    e.add_argument("hero", help="Hero hole cards, e.g. AhKd")
    e.add_argument("villain", help="Villain hole cards")
    e.add_argument("--board", default="", help="Community cards")
    e.add_argument("--iterations", type=int, default=None, help="Number of trials")
    e.add_argument("--seed", type=int, default=None, help="Random seed")
    e.set_defaults(func=cmd_equity)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)

    if args.config:
        if not os.path.exists(args.config):
            print(f"Error: config file not found: {args.config}")
            return 1
        os.environ["HANDREPLAY_CONFIG"] = args.config
        get_config(reset=True)

    setup_logging(args.verbose)

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
