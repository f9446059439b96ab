#!/usr/bin/env python
"""
Queries the public Livecoin endpoints and, when LIVECOIN_API_KEY / LIVECOIN_API_SECRET are
set, the account endpoints too. Nothing here places orders or moves funds.

    python scripts/livecoin_example.py btc usd
"""
import argparse
import asyncio
import logging
from typing import Any

from livecoin import LivecoinClient, LivecoinConfig, TransportError
from livecoin.livecoin_options import OrderBookOptions

logger = logging.getLogger("livecoin_example")


def show(title: str, result: Any):
    logger.info(f"{title}: {result}")


async def main(ticker: str, pair: str):
    config = LivecoinConfig.from_env()
    client = LivecoinClient.from_config(config)

    ticker_info, order_book, bid_ask = await asyncio.gather(
        client.get_ticker(ticker, pair),
        client.get_orders(ticker, pair, OrderBookOptions(group_by_price=True, depth=4)),
        client.get_bid_and_ask(ticker, pair),
    )
    show("ticker", ticker_info)
    show("order book", order_book)
    show("max bid / min ask", bid_ask)

    if not config.api_key:
        logger.info("No API key configured, skipping private endpoints.")
        return

    show("balance", await client.get_balance(ticker))
    show("trades", await client.get_user_trades({"order_desc": True, "limit": 4}))
    show("trading fee", await client.get_trading_fee())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    parser = argparse.ArgumentParser(description="Livecoin REST API example")
    parser.add_argument("ticker", nargs="?", default="btc")
    parser.add_argument("pair", nargs="?", default="usd")
    args = parser.parse_args()
    try:
        asyncio.run(main(args.ticker, args.pair))
    except TransportError as e:
        logger.error(f"Request to {e.url} failed: {e}")
        raise SystemExit(1)
