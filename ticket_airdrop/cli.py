"""Command line entry point for building leaderboards and running airdrops."""

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, List, Optional, Sequence

import requests

from .airdrop import AirdropEngine, verify_airdrop
from .client import BitsharesClient
from .config import AirdropConfig, parse_decimal, parse_methods
from .digest import HASH_MODES
from .distributions import FISH_DEPTHS, METHODS
from .errors import AirdropError
from .ledger import build_leaderboard, parse_record, tally_weights
from .models import LeaderboardEntry
from .resolver import MODES

logger = logging.getLogger('ticket_airdrop')


def _read_json(path: str) -> Any:
    with open(path, 'r', encoding='utf-8') as handle:
        return json.load(handle)


def _write_json(path: str, payload: Any) -> None:
    with open(path, 'w', encoding='utf-8') as handle:
        json.dump(payload, handle, indent=4)
        handle.write('\n')


def _load_leaderboard(path: str) -> List[LeaderboardEntry]:
    return [LeaderboardEntry.from_dict(item) for item in _read_json(path)]


def _config(args: argparse.Namespace) -> AirdropConfig:
    return AirdropConfig.from_env().override(
        hash_mode=getattr(args, 'hash_mode', None),
        methods=parse_methods(getattr(args, 'methods', None)),
        mode=getattr(args, 'mode', None),
        reward_pool=parse_decimal(getattr(args, 'pool', None)),
        fish_splinter=True if getattr(args, 'fish_splinter', False) else None,
        fish_depth=getattr(args, 'fish_depth', None),
        node_url=getattr(args, 'node', None),
    )


def _client(config: AirdropConfig) -> BitsharesClient:
    return BitsharesClient(config.node_url, timeout=config.timeout)


def _signature(args: argparse.Namespace, config: AirdropConfig) -> str:
    if args.signature:
        return args.signature
    if args.block is None:
        raise AirdropError("Provide --signature or --block")
    with _client(config) as client:
        return client.get_block_signature(args.block)


def cmd_fetch(args: argparse.Namespace) -> int:
    config = _config(args)
    with _client(config) as client:
        tickets = client.fetch_tickets(start=args.start, max_batches=args.max_batches)
    _write_json(args.out, tickets)
    print(f"✓ {len(tickets)} tickets saved to {args.out}")
    return 0


def cmd_leaderboard(args: argparse.Namespace) -> int:
    config = _config(args)
    entries = [parse_record(record) for record in _read_json(args.tickets)]
    tallies = tally_weights(entries)

    names = {}
    if args.resolve_names:
        with _client(config) as client:
            names = client.get_account_names(tallies)

    leaderboard = build_leaderboard(tallies, names.get)
    _write_json(args.out, [entry.to_dict() for entry in leaderboard])
    print(f"🏆 Leaderboard of {len(leaderboard)} holders saved to {args.out}")
    return 0


def cmd_draw(args: argparse.Namespace) -> int:
    config = _config(args)
    leaderboard = _load_leaderboard(args.leaderboard)
    signature = _signature(args, config)
    result = AirdropEngine(config).run(signature, leaderboard, args.block)
    _write_json(args.out, result.to_dict())
    print(f"✓ {len(result.result)} winners from {result.total_draws} draws saved to {args.out}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    config = _config(args)
    artifact = _read_json(args.artifact)
    leaderboard = _load_leaderboard(args.leaderboard)
    if args.block is None and args.signature is None:
        args.block = artifact.get('block_number')
    summary = verify_airdrop(artifact, _signature(args, config), leaderboard, config)
    print(f"✓ Airdrop for block {summary['block_number']} verified: "
          f"{summary['winners']} winners, {summary['total_draws']} draws")
    return 0


def cmd_plot(args: argparse.Namespace) -> int:
    from .visualize import plot_draw_histogram, plot_geometric_samples, plot_leaderboard

    config = _config(args)
    out_dir = Path(args.out_dir)
    leaderboard = _load_leaderboard(args.leaderboard)
    print(f"✓ {plot_leaderboard(leaderboard, out_dir / 'leaderboard.png')}")
    if args.signature or args.block is not None:
        draws = AirdropEngine(config).draws(_signature(args, config))
        print(f"✓ {plot_draw_histogram(draws, out_dir / 'draws.png')}")
        print(f"✓ {plot_geometric_samples(draws, out_dir / 'samples.png')}")
    return 0


def _add_node(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--node', help='Node RPC URL (default: $AIRDROP_NODE_URL)')


def _add_signature(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--signature', help='Witness signature to draw from')
    parser.add_argument('--block', type=int, help='Block number (signature fetched from the node)')


def _add_draw_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--methods', help=f"Comma separated subset of: {', '.join(METHODS)}")
    parser.add_argument('--hash', dest='hash_mode', choices=HASH_MODES)
    parser.add_argument('--mode', choices=MODES)
    parser.add_argument('--pool', help='Reward pool to distribute')
    parser.add_argument('--fish-splinter', action='store_true',
                        help='Fish splinters into every remaining point')
    parser.add_argument('--fish-depth', choices=sorted(FISH_DEPTHS))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ticket-airdrop',
        description='Deterministic airdrop lottery over BitShares ticket holders.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    fetch = sub.add_parser('fetch', help='Fetch tickets from a node')
    _add_node(fetch)
    fetch.add_argument('--start', type=int, default=0)
    fetch.add_argument('--max-batches', type=int)
    fetch.add_argument('--out', default='tickets.json')
    fetch.set_defaults(func=cmd_fetch)

    board = sub.add_parser('leaderboard', help='Compute the leaderboard from tickets')
    _add_node(board)
    board.add_argument('--tickets', default='tickets.json')
    board.add_argument('--resolve-names', action='store_true', help='Look up account names')
    board.add_argument('--out', default='leaderboard.json')
    board.set_defaults(func=cmd_leaderboard)

    draw = sub.add_parser('draw', help='Run the airdrop lottery')
    _add_node(draw)
    _add_signature(draw)
    _add_draw_options(draw)
    draw.add_argument('--leaderboard', default='leaderboard.json')
    draw.add_argument('--out', default='airdrop.json')
    draw.set_defaults(func=cmd_draw)

    verify = sub.add_parser('verify', help='Recompute and check a published airdrop')
    _add_node(verify)
    _add_signature(verify)
    verify.add_argument('--artifact', default='airdrop.json')
    verify.add_argument('--leaderboard', default='leaderboard.json')
    verify.set_defaults(func=cmd_verify)

    plot = sub.add_parser('plot', help='Render leaderboard and draw charts')
    _add_node(plot)
    _add_signature(plot)
    _add_draw_options(plot)
    plot.add_argument('--leaderboard', default='leaderboard.json')
    plot.add_argument('--out-dir', default='datagraphics')
    plot.set_defaults(func=cmd_plot)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    try:
        return args.func(args)
    except (AirdropError, requests.RequestException, OSError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == '__main__':
    sys.exit(main())
