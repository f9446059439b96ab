# A single source of truth for constant variables related to the exchange

EXCHANGE_NAME = "livecoin"
REST_URL = "https://api.livecoin.net"

# HTTP verbs
GET = "GET"
POST = "POST"
SUPPORTED_METHODS = (GET, POST)

# Headers
API_KEY_HEADER = "API-key"
SIGN_HEADER = "Sign"
CONTENT_TYPE_HEADER = "Content-Type"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# REST API ENDPOINTS
# Public data
TICKER_PATH_URL = "exchange/ticker"
LAST_TRADES_PATH_URL = "exchange/last_trades"
ORDER_BOOK_PATH_URL = "exchange/order_book"
ALL_ORDER_BOOK_PATH_URL = "exchange/all/order_book"
MAXBID_MINASK_PATH_URL = "exchange/maxbid_minask"
RESTRICTIONS_PATH_URL = "exchange/restrictions"
COIN_INFO_PATH_URL = "info/coinInfo"

# Private data
USER_TRADES_PATH_URL = "exchange/trades"
CLIENT_ORDERS_PATH_URL = "exchange/client_orders"
ORDER_PATH_URL = "exchange/order"
BALANCES_PATH_URL = "payment/balances"
BALANCE_PATH_URL = "payment/balance"
TRANSACTIONS_PATH_URL = "payment/history/transactions"
TRANSACTIONS_SIZE_PATH_URL = "payment/history/size"
COMMISSION_PATH_URL = "exchange/commission"
COMMISSION_COMMON_INFO_PATH_URL = "exchange/commissionCommonInfo"

# Orders
BUY_LIMIT_PATH_URL = "exchange/buylimit"
SELL_LIMIT_PATH_URL = "exchange/selllimit"
BUY_MARKET_PATH_URL = "exchange/buymarket"
SELL_MARKET_PATH_URL = "exchange/sellmarket"
CANCEL_LIMIT_PATH_URL = "exchange/cancellimit"

# Deposits and withdrawals
GET_ADDRESS_PATH_URL = "payment/get/address"
WITHDRAW_COIN_PATH_URL = "payment/out/coin"
WITHDRAW_PAYEER_PATH_URL = "payment/out/payeer"
WITHDRAW_CAPITALIST_PATH_URL = "payment/out/capitalist"
WITHDRAW_ADVCASH_PATH_URL = "payment/out/advcash"
WITHDRAW_CARD_PATH_URL = "payment/out/card"
WITHDRAW_OKPAY_PATH_URL = "payment/out/okpay"
WITHDRAW_PERFECT_MONEY_PATH_URL = "payment/out/perfectmoney"

# Vouchers
VOUCHER_MAKE_PATH_URL = "payment/voucher/make"
VOUCHER_AMOUNT_PATH_URL = "payment/voucher/amount"
VOUCHER_REDEEM_PATH_URL = "payment/voucher/redeem"
