"""CLI commands for the world catalog, markets and news"""
import argparse
from typing import Dict

from ..daemon.daemon_client import DaemonClient, DaemonError
from .formatting import print_json, report


def _print_market(market: Dict) -> None:
    print("  Selling:")
    for offer in market["selling"]:
        print(f"    {offer['name']:<8} {offer['price']:>5} gold  (stock {offer['stock']})")
    print("  Buying:")
    for order in market["buying"]:
        print(f"    {order['name']:<8} {order['price']:>5} gold  (demand {order['demand']})")


def _fetch(call, args: argparse.Namespace):
    try:
        result = call()
    except DaemonError as e:
        print(f"❌ Error: {e}")
        return None, 1
    if getattr(args, "json", False):
        print_json(result)
        return None, 0 if result.get("ok") else 1
    if not result.get("ok"):
        return None, report(result)
    return result["data"], 0


def list_cities_command(args: argparse.Namespace) -> int:
    """Handle cities command"""
    cities, code = _fetch(DaemonClient().get_cities, args)
    if cities is None:
        return code

    for city in cities:
        routes = ", ".join(
            f"{c['targetId']} ({c['distance']}s, risk {c['risk']:.0%})" for c in city["connections"]
        )
        print(f"{city['name']} [{city['id']}] - {city['economyType']}")
        print(f"  Routes: {routes or 'none'}")
        if city["market"] is not None:
            _print_market(city["market"])
    return 0


def list_goods_command(args: argparse.Namespace) -> int:
    """Handle goods command"""
    goods, code = _fetch(DaemonClient().get_goods, args)
    if goods is None:
        return code

    print(f"Goods ({len(goods)}):")
    for good in goods:
        print(f"  [{good['id']}] {good['name']} - base price {good['basePrice']}")
    return 0


def market_command(args: argparse.Namespace) -> int:
    """Handle market command"""
    client = DaemonClient()
    market, code = _fetch(lambda: client.get_market(args.city), args)
    if market is None:
        return code

    print(f"Market of {args.city}:")
    _print_market(market)
    return 0


def news_command(args: argparse.Namespace) -> int:
    """Handle news command"""
    news, code = _fetch(DaemonClient().get_news, args)
    if news is None:
        return code

    print(f"📰 {news['news']['text']}")
    print(f"Next change in {int(news['secondsUntilChange'])}s")
    return 0


def setup_market_commands(subparsers):
    cities = subparsers.add_parser("cities", help="List cities with routes and markets")
    cities.add_argument("--json", action="store_true", help="Output as JSON")
    cities.set_defaults(func=list_cities_command)

    goods = subparsers.add_parser("goods", help="List tradable goods")
    goods.add_argument("--json", action="store_true", help="Output as JSON")
    goods.set_defaults(func=list_goods_command)

    market = subparsers.add_parser("market", help="Show one city's market")
    market.add_argument("city", help="City ID")
    market.add_argument("--json", action="store_true", help="Output as JSON")
    market.set_defaults(func=market_command)

    news = subparsers.add_parser("news", help="Show the current economic news")
    news.add_argument("--json", action="store_true", help="Output as JSON")
    news.set_defaults(func=news_command)
