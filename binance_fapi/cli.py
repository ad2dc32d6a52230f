"""
Command-Line Interface for the Binance Futures REST client.

Calls any endpoint by group and method name and prints the JSON response.
Parameters are given as name=value pairs using the Python argument names.

Examples:
  binance-fapi market order_book symbol=BTCUSDT limit=5
  binance-fapi --testnet trade new_order symbol=BTCUSDT side=BUY type=MARKET quantity=0.002
  binance-fapi trade cancel_multiple_orders symbol=BTCUSDT 'order_id_list=[1,2]'
  binance-fapi groups trade
  binance-fapi config

Orders, cancellations and setting changes ask for confirmation unless
--yes is given.
"""

import argparse
import inspect
import json
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence

import requests
from binance.exceptions import BinanceRequestException

from binance_fapi.client import ENDPOINT_GROUPS, BinanceFuturesClient
from binance_fapi.config import TESTNET_BASE_URL, print_config
from binance_fapi.errors import APIError
from binance_fapi.logger_setup import setup_logger
from binance_fapi.validators import parse_param

logger = setup_logger("cli")

# ─── ANSI Colors ──────────────────────────────────────────────────────────────
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"
RED = "\033[91m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
WHITE = "\033[97m"

# Endpoints that change account state; these ask before sending
CONFIRM_ENDPOINTS = frozenset(
    {
        "new_order",
        "place_multiple_orders",
        "modify_order",
        "modify_multiple_orders",
        "cancel_order",
        "cancel_all_open_orders",
        "cancel_multiple_orders",
        "auto_cancel_all_open_orders",
        "change_position_mode",
        "change_multi_assets_mode",
        "change_initial_leverage",
        "change_margin_type",
        "modify_isolated_position_margin",
        "toggle_bnb_burn_on_futures_trade",
        "accept_the_offered_quote",
    }
)


def print_error(msg):
    print(f"  {RED}❌ {msg}{RESET}", file=sys.stderr)


def print_warn(msg):
    print(f"  {YELLOW}⚠️  {msg}{RESET}", file=sys.stderr)


def print_header(title):
    width = 60
    print(f"\n{BLUE}{BOLD}{'═' * width}{RESET}")
    print(f"{BLUE}{BOLD}  {title}{RESET}")
    print(f"{BLUE}{BOLD}{'═' * width}{RESET}")


def list_endpoints(group: type) -> List[str]:
    """Names of the endpoint methods defined on an endpoint group class."""
    return sorted(
        name
        for name, member in vars(group).items()
        if not name.startswith("_") and inspect.isfunction(member)
    )


def build_call_kwargs(method: Callable[..., Any], tokens: Sequence[str]) -> Dict[str, Any]:
    """
    Parse name=value tokens and check them against an endpoint signature.

    Raises:
        ValueError: On malformed tokens, repeated names, unknown names or
                    missing required arguments.
    """
    kwargs: Dict[str, Any] = {}
    for token in tokens:
        name, value = parse_param(token)
        if name in kwargs:
            raise ValueError(f"Parameter '{name}' given more than once.")
        kwargs[name] = value

    try:
        inspect.signature(method).bind(**kwargs)
    except TypeError as e:
        raise ValueError(f"{method.__name__}: {e}")

    return kwargs


def confirm_call(endpoint: str, kwargs: Dict[str, Any]) -> bool:
    """Show the call summary and ask for confirmation."""
    print_header(f"Confirm {endpoint}")
    for label, value in kwargs.items():
        print(f"  {DIM}{label:<24}{RESET} {WHITE}{BOLD}{value}{RESET}")
    print()
    answer = input(f"  {YELLOW}› Send this request? (y/n): {RESET}").strip().lower()
    return answer in ("y", "yes")


# ─── Argument Parsing ─────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser with one subcommand per endpoint group."""
    parser = argparse.ArgumentParser(
        prog="binance-fapi",
        description="Binance USDT-M Futures REST client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  binance-fapi market order_book symbol=BTCUSDT limit=5\n"
            "  binance-fapi --testnet trade query_order symbol=BTCUSDT order_id=42\n"
            "  binance-fapi groups market\n"
        ),
    )
    parser.add_argument("--testnet", action="store_true", help="Use the testnet endpoint")
    parser.add_argument("--base-url", help="Explicit REST base URL (overrides --testnet)")
    parser.add_argument("--yes", "-y", action="store_true",
                        help="Skip confirmation for state-changing endpoints")
    parser.add_argument("--show-limit-usage", action="store_true",
                        help="Include X-MBX-USED-WEIGHT / ORDER-COUNT headers in the output")

    sub = parser.add_subparsers(dest="command", help="Endpoint group or utility command")

    groups = sub.add_parser("groups", help="List endpoints, optionally for one group")
    groups.add_argument("group", nargs="?", choices=sorted(ENDPOINT_GROUPS))

    sub.add_parser("config", help="Show the configuration (API key masked)")

    for name, group in ENDPOINT_GROUPS.items():
        g = sub.add_parser(name, help=f"Call a {name} endpoint")
        g.add_argument("endpoint", choices=list_endpoints(group), metavar="endpoint",
                       help="Endpoint method name (see 'groups')")
        g.add_argument("params", nargs="*", metavar="name=value",
                       help="Endpoint arguments")

    return parser


def show_groups(group: Optional[str]) -> None:
    names = [group] if group else list(ENDPOINT_GROUPS)
    for name in names:
        print_header(name)
        for endpoint in list_endpoints(ENDPOINT_GROUPS[name]):
            print(f"  {endpoint}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "groups":
        show_groups(args.group)
        return 0

    if args.command == "config":
        print_config(args.base_url or (TESTNET_BASE_URL if args.testnet else None))
        return 0

    try:
        client = BinanceFuturesClient(
            base_url=args.base_url,
            testnet=True if args.testnet else None,
            show_limit_usage=args.show_limit_usage,
        )
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    method = getattr(getattr(client, args.command), args.endpoint)

    try:
        kwargs = build_call_kwargs(method, args.params)
    except ValueError as e:
        print_error(str(e))
        client.close()
        return 1

    try:
        if args.endpoint in CONFIRM_ENDPOINTS and not args.yes:
            if not confirm_call(args.endpoint, kwargs):
                print_warn("Request cancelled by user.")
                return 1

        logger.debug(f"Calling {args.command}.{args.endpoint} with {kwargs}")
        result = method(**kwargs)
        print(json.dumps(result, indent=2))
        return 0

    except APIError as e:
        print_error(f"API error {e.code}: {e.message} (HTTP {e.status_code})")
        return 1
    except BinanceRequestException as e:
        print_error(e.message)
        return 1
    except requests.RequestException as e:
        print_error(f"Network error: {e}")
        logger.error(f"Network error calling {args.endpoint}: {e}", exc_info=True)
        return 1
    except KeyboardInterrupt:
        print_warn("Interrupted by user.")
        return 1
    except EOFError:
        print_error("No input for the confirmation prompt; use --yes to skip it.")
        return 1
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
