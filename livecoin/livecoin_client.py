import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Union

import aiohttp
from pydantic import SecretStr

from livecoin import livecoin_constants as CONSTANTS
from livecoin import livecoin_utils
from livecoin.livecoin_auth import LivecoinAuth
from livecoin.livecoin_config import LivecoinConfig
from livecoin.livecoin_options import (
    ClientOrdersOptions,
    LastTradesOptions,
    LivecoinOptions,
    OrderBookOptions,
    PayeerOptions,
    PerfectMoneyOptions,
    TransactionsOptions,
    UserTradesOptions,
)
from livecoin.livecoin_request_handler import LivecoinRequestHandler

lc_logger = None

Number = Union[int, float, Decimal, str]
OptionsArg = Optional[Union[LivecoinOptions, Mapping[str, Any]]]


class LivecoinClient:
    """
    LivecoinClient exposes the Livecoin REST API. Every method is a coroutine that issues
    exactly one request and resolves with the parsed JSON response, whatever its shape.
    Errors reported by the exchange come back as ordinary JSON; only transport failures raise.

    Credentials are optional and only needed for the private, order, transfer and voucher calls.
    """

    @classmethod
    def logger(cls) -> logging.Logger:
        global lc_logger
        if lc_logger is None:
            lc_logger = logging.getLogger(__name__)
        return lc_logger

    def __init__(self,
                 api_key: str = "",
                 api_secret: str = "",
                 config: Optional[LivecoinConfig] = None,
                 shared_client: Optional[aiohttp.ClientSession] = None):
        """
        :param api_key: The API key to connect to private Livecoin APIs.
        :param api_secret: The API secret.
        :param config: Connection settings. Explicit api_key / api_secret take precedence over its credentials.
        :param shared_client: An aiohttp session to reuse for every request, owned by the caller.
        """
        config = config or LivecoinConfig()
        update: Dict[str, Any] = {}
        if api_key:
            update["api_key"] = api_key
        if api_secret:
            update["api_secret"] = SecretStr(api_secret)
        if update:
            config = config.model_copy(update=update)
        self._config = config
        self._request_handler = LivecoinRequestHandler(
            auth=config.create_auth(),
            rest_url=config.rest_url,
            request_timeout=config.request_timeout,
            shared_client=shared_client,
        )

    @classmethod
    def from_config(cls, config: LivecoinConfig, shared_client: Optional[aiohttp.ClientSession] = None) -> "LivecoinClient":
        return cls(config=config, shared_client=shared_client)

    @property
    def name(self) -> str:
        return CONSTANTS.EXCHANGE_NAME

    @property
    def config(self) -> LivecoinConfig:
        return self._config

    @property
    def request_handler(self) -> LivecoinRequestHandler:
        return self._request_handler

    def login(self, api_key: str, api_secret: str):
        """
        Replaces the client's credentials. Requests already in flight keep signing with
        the pair they started with.
        """
        self._config = self._config.model_copy(update={"api_key": api_key, "api_secret": SecretStr(api_secret)})
        self._request_handler.auth = LivecoinAuth(api_key=api_key, secret_key=api_secret)
        self.logger().info(f"Credentials updated for API key {api_key[:4]}***.")

    async def _public(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request_handler.send(endpoint, params, CONSTANTS.GET, requires_auth=False)

    async def _private_get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request_handler.send(endpoint, params, CONSTANTS.GET, requires_auth=True)

    async def _private_post(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request_handler.send(endpoint, params, CONSTANTS.POST, requires_auth=True)

    @staticmethod
    def _with_options(params: Dict[str, Any], options_cls, options: OptionsArg) -> Dict[str, Any]:
        parsed = options_cls.parse(options)
        if parsed is not None:
            params.update(parsed.to_params())
        return params

    # Public data

    async def get_ticker(self, ticker: str, pair: str) -> Any:
        """
        Gets ticker information for a currency pair, e.g. get_ticker("btc", "usd").
        """
        currency_pair = livecoin_utils.convert_to_exchange_trading_pair(ticker, pair)
        return await self._public(CONSTANTS.TICKER_PATH_URL, {"currencyPair": currency_pair})

    async def get_all_tickers(self) -> Any:
        return await self._public(CONSTANTS.TICKER_PATH_URL)

    async def get_last_trades(self, ticker: str, pair: str, options: OptionsArg = None) -> Any:
        """
        Gets the most recent trades of a currency pair.
        :param options: LastTradesOptions or mapping with minutes_or_hour (true for the last minute,
        false for the last hour) and type (BUY or SELL)
        """
        params = {"currencyPair": livecoin_utils.convert_to_exchange_trading_pair(ticker, pair)}
        return await self._public(CONSTANTS.LAST_TRADES_PATH_URL,
                                  self._with_options(params, LastTradesOptions, options))

    async def get_orders(self, ticker: str, pair: str, options: OptionsArg = None) -> Any:
        """
        Gets the order book of a currency pair.
        :param options: OrderBookOptions or mapping with group_by_price and depth
        """
        params = {"currencyPair": livecoin_utils.convert_to_exchange_trading_pair(ticker, pair)}
        return await self._public(CONSTANTS.ORDER_BOOK_PATH_URL,
                                  self._with_options(params, OrderBookOptions, options))

    async def get_all_orders(self, options: OptionsArg = None) -> Any:
        return await self._public(CONSTANTS.ALL_ORDER_BOOK_PATH_URL,
                                  self._with_options({}, OrderBookOptions, options))

    async def get_bid_and_ask(self, ticker: str, pair: str) -> Any:
        """
        Gets the maximum bid and minimum ask of a currency pair.
        """
        currency_pair = livecoin_utils.convert_to_exchange_trading_pair(ticker, pair)
        return await self._public(CONSTANTS.MAXBID_MINASK_PATH_URL, {"currencyPair": currency_pair})

    async def get_all_bids_and_asks(self) -> Any:
        return await self._public(CONSTANTS.MAXBID_MINASK_PATH_URL)

    async def get_restrictions(self) -> Any:
        """
        Gets the minimum order amounts of every currency pair.
        """
        return await self._public(CONSTANTS.RESTRICTIONS_PATH_URL)

    async def get_currencies(self) -> Any:
        return await self._public(CONSTANTS.COIN_INFO_PATH_URL)

    # Private data

    async def get_user_trades(self, options: OptionsArg = None) -> Any:
        """
        Gets the user's recent trades.
        :param options: UserTradesOptions or mapping with currency_pair (e.g. BTC/USD), order_desc,
        limit and offset
        """
        return await self._private_get(CONSTANTS.USER_TRADES_PATH_URL,
                                       self._with_options({}, UserTradesOptions, options))

    async def get_client_orders(self, options: OptionsArg = None) -> Any:
        """
        Gets the user's orders.
        :param options: ClientOrdersOptions or mapping with currency_pair, open_closed, issued_from,
        issued_to, start_row and end_row
        """
        return await self._private_get(CONSTANTS.CLIENT_ORDERS_PATH_URL,
                                       self._with_options({}, ClientOrdersOptions, options))

    async def get_user_order(self, order_id: Union[int, str]) -> Any:
        return await self._private_get(CONSTANTS.ORDER_PATH_URL, {"orderId": order_id})

    async def get_balances(self, currency: str = "") -> Any:
        """
        Gets the user's balances, all of them when no currency is given.
        """
        params = {"currency": livecoin_utils.convert_to_exchange_currency(currency)} if currency else {}
        return await self._private_get(CONSTANTS.BALANCES_PATH_URL, params)

    async def get_balance(self, currency: str) -> Any:
        return await self._private_get(CONSTANTS.BALANCE_PATH_URL,
                                       {"currency": livecoin_utils.convert_to_exchange_currency(currency)})

    async def get_transactions(self, start: Union[int, str], end: Union[int, str], options: OptionsArg = None) -> Any:
        """
        Gets the user's transactions between two timestamps.
        :param start: start of the range, milliseconds since epoch
        :param end: end of the range, milliseconds since epoch
        :param options: TransactionsOptions or mapping with types, limit and offset
        """
        params = {"start": start, "end": end}
        return await self._private_get(CONSTANTS.TRANSACTIONS_PATH_URL,
                                       self._with_options(params, TransactionsOptions, options))

    async def get_num_transactions(self, start: Union[int, str], end: Union[int, str], types: Optional[str] = None) -> Any:
        params = {"start": start, "end": end}
        if types:
            params["types"] = types
        return await self._private_get(CONSTANTS.TRANSACTIONS_SIZE_PATH_URL, params)

    async def get_trading_fee(self) -> Any:
        return await self._private_get(CONSTANTS.COMMISSION_PATH_URL)

    async def get_trading_fee_and_volume(self) -> Any:
        return await self._private_get(CONSTANTS.COMMISSION_COMMON_INFO_PATH_URL)

    # Orders

    async def buy_limit(self, ticker: str, pair: str, price: Number, quantity: Number) -> Any:
        """
        Places a limit buy order.
        :param ticker: The currency to buy, e.g. btc
        :param pair: The currency to pay with, e.g. usd
        :param price: The limit price
        :param quantity: The amount of ticker to buy
        """
        return await self._place_limit_order(CONSTANTS.BUY_LIMIT_PATH_URL, ticker, pair, price, quantity)

    async def sell_limit(self, ticker: str, pair: str, price: Number, quantity: Number) -> Any:
        return await self._place_limit_order(CONSTANTS.SELL_LIMIT_PATH_URL, ticker, pair, price, quantity)

    async def buy_market(self, ticker: str, pair: str, quantity: Number) -> Any:
        return await self._place_market_order(CONSTANTS.BUY_MARKET_PATH_URL, ticker, pair, quantity)

    async def sell_market(self, ticker: str, pair: str, quantity: Number) -> Any:
        return await self._place_market_order(CONSTANTS.SELL_MARKET_PATH_URL, ticker, pair, quantity)

    async def cancel_limit(self, ticker: str, pair: str, order_id: Union[int, str]) -> Any:
        """
        Cancels an open limit order.
        """
        params = {
            "currencyPair": livecoin_utils.convert_to_exchange_trading_pair(ticker, pair),
            "orderId": order_id,
        }
        return await self._private_post(CONSTANTS.CANCEL_LIMIT_PATH_URL, params)

    async def _place_limit_order(self, endpoint: str, ticker: str, pair: str, price: Number, quantity: Number) -> Any:
        params = {
            "currencyPair": livecoin_utils.convert_to_exchange_trading_pair(ticker, pair),
            "price": price,
            "quantity": quantity,
        }
        return await self._private_post(endpoint, params)

    async def _place_market_order(self, endpoint: str, ticker: str, pair: str, quantity: Number) -> Any:
        params = {
            "currencyPair": livecoin_utils.convert_to_exchange_trading_pair(ticker, pair),
            "quantity": quantity,
        }
        return await self._private_post(endpoint, params)

    # Deposits and withdrawals

    async def get_address(self, ticker: str) -> Any:
        """
        Gets the deposit address of a currency.
        """
        return await self._private_get(CONSTANTS.GET_ADDRESS_PATH_URL,
                                       {"currency": livecoin_utils.convert_to_exchange_currency(ticker)})

    async def withdraw(self, amount: Number, ticker: str, wallet: str) -> Any:
        """
        Withdraws coins to a wallet address.
        """
        return await self._private_post(CONSTANTS.WITHDRAW_COIN_PATH_URL,
                                        self._withdrawal_params(amount, ticker, wallet))

    async def to_payeer(self, amount: Number, ticker: str, wallet: str, options: OptionsArg = None) -> Any:
        """
        Withdraws to a Payeer account.
        :param options: PayeerOptions or mapping with protect, protect_code and protect_period (days)
        """
        params = self._withdrawal_params(amount, ticker, wallet)
        return await self._private_post(CONSTANTS.WITHDRAW_PAYEER_PATH_URL,
                                        self._with_options(params, PayeerOptions, options))

    async def to_capitalist(self, amount: Number, currency: str, wallet: str) -> Any:
        return await self._private_post(CONSTANTS.WITHDRAW_CAPITALIST_PATH_URL,
                                        self._withdrawal_params(amount, currency, wallet))

    async def to_advcash(self, amount: Number, currency: str, wallet: str) -> Any:
        return await self._private_post(CONSTANTS.WITHDRAW_ADVCASH_PATH_URL,
                                        self._withdrawal_params(amount, currency, wallet))

    async def to_bank_card(self,
                           amount: Number,
                           currency: str,
                           card_number: str,
                           expiry_month: str,
                           expiry_year: str) -> Any:
        """
        Withdraws to a bank card.
        :param currency: USD, EUR or RUR
        :param expiry_month: "01" to "12"
        :param expiry_year: the last two digits of the year, e.g. "18"
        """
        params = {
            "amount": amount,
            "currency": livecoin_utils.convert_to_exchange_currency(currency),
            "card_number": card_number,
            "expiry_month": expiry_month,
            "expiry_year": expiry_year,
        }
        return await self._private_post(CONSTANTS.WITHDRAW_CARD_PATH_URL, params)

    async def to_okpay(self, amount: Number, currency: str, wallet: str, invoice: Union[str, int] = "") -> Any:
        params = self._withdrawal_params(amount, currency, wallet)
        if invoice != "":
            params["invoice"] = invoice
        return await self._private_post(CONSTANTS.WITHDRAW_OKPAY_PATH_URL, params)

    async def to_perfect_money(self, amount: Number, ticker: str, wallet: str, options: OptionsArg = None) -> Any:
        params = self._withdrawal_params(amount, ticker, wallet)
        return await self._private_post(CONSTANTS.WITHDRAW_PERFECT_MONEY_PATH_URL,
                                        self._with_options(params, PerfectMoneyOptions, options))

    @staticmethod
    def _withdrawal_params(amount: Number, currency: str, wallet: str) -> Dict[str, Any]:
        return {
            "amount": amount,
            "currency": livecoin_utils.convert_to_exchange_currency(currency),
            "wallet": wallet,
        }

    # Vouchers

    async def make_voucher(self, amount: Number, ticker: str, description: str = "") -> Any:
        """
        Creates a voucher and resolves with its code.
        """
        params = {
            "amount": amount,
            "currency": livecoin_utils.convert_to_exchange_currency(ticker),
            "description": description,
        }
        return await self._private_post(CONSTANTS.VOUCHER_MAKE_PATH_URL, params)

    async def get_voucher_amount(self, voucher_code: str) -> Any:
        return await self._private_post(CONSTANTS.VOUCHER_AMOUNT_PATH_URL, {"voucher_code": voucher_code})

    async def redeem_voucher(self, voucher_code: str) -> Any:
        return await self._private_post(CONSTANTS.VOUCHER_REDEEM_PATH_URL, {"voucher_code": voucher_code})
