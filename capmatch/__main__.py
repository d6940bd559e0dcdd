"""CLI entry point for Capital Match."""

import argparse
import json
import logging
import sys
from pathlib import Path

from capmatch.config import settings
from capmatch.errors import DealValidationError
from capmatch.match import match_deal
from capmatch.models import MatchResponse

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def load_deal(deal_path: Path) -> dict:
    """Load a deal from a JSON file."""
    with open(deal_path, "r", encoding="utf-8") as f:
        return json.load(f)


def print_summary(response: MatchResponse):
    """Print a summary of match results to console."""
    deal = response.deal

    print("\n" + "=" * 60)
    print("INVESTOR MATCHING - RESULTS SUMMARY")
    print("=" * 60)

    print(f"\nDeal: {deal['assetType']} in {deal['market']}")
    print(f"   Amount: ${float(deal['investmentAmount']):,.0f} | Return: {deal['expectedReturn']}%"
          f" | Risk: {deal['riskProfile']}")
    print(f"\nGood matches (score > {settings.good_match_threshold}): {response.total_matches}")

    if response.matches:
        print("\n" + "-" * 60)
        print(f"TOP {len(response.matches)} INVESTORS")
        print("-" * 60)

        for rank, match in enumerate(response.matches, 1):
            details = match.match_details
            met = [
                label for label, ok in [
                    ("asset type", details.asset_type_match),
                    ("market", details.market_match),
                    ("size", details.investment_size_match),
                    ("return", details.return_expectation_match),
                    ("risk", details.risk_profile_match),
                ]
                if ok
            ]
            print(f"\n#{rank} {match.investor_name} ({match.investor_id})")
            print(f"   Score: {match.match_score}")
            print(f"   Matched: {', '.join(met) if met else 'none'}")

    print("\n" + "=" * 60)


def run_match(args: argparse.Namespace) -> int:
    """Score a deal file and print the results."""
    if not args.deal.exists():
        logger.error(f"Deal file not found: {args.deal}")
        return 1

    try:
        payload = load_deal(args.deal)
        logger.info(f"Loaded deal from {args.deal}")
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load deal: {e}")
        return 1

    try:
        response = match_deal(payload, top_n=args.top)
    except DealValidationError as e:
        logger.error(e.message)
        return 1

    if args.json:
        print(response.model_dump_json(by_alias=True, indent=2))
    else:
        print_summary(response)
    return 0


def run_server(args: argparse.Namespace) -> int:
    """Serve the HTTP API."""
    import uvicorn

    uvicorn.run("capmatch.api.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Capital Match - Match real-estate deals with investors"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    match_parser = subparsers.add_parser("match", help="Score a deal against the investor list")
    match_parser.add_argument(
        "--deal", "-d",
        type=Path,
        default=Path("deal.json"),
        help="Path to deal JSON file (default: deal.json)",
    )
    match_parser.add_argument(
        "--top", "-t",
        type=int,
        default=settings.top_matches,
        help=f"Number of matches to show (default: {settings.top_matches})",
    )
    match_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw JSON response",
    )
    match_parser.set_defaults(func=run_match)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.set_defaults(func=run_server)

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        sys.exit(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
