"""
Optional query fields recognised by individual Livecoin endpoints.

Each model uses python style attribute names and exposes the exchange's own parameter
names as aliases, so both `OrderBookOptions(group_by_price=True)` and
`OrderBookOptions(groupByPrice=True)` work. Unknown fields are rejected.
"""
from typing import Any, Dict, Literal, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from livecoin import livecoin_utils

T = TypeVar("T", bound="LivecoinOptions")


class LivecoinOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    @classmethod
    def parse(cls: Type[T], options: Union[T, Mapping[str, Any], None]) -> Optional[T]:
        """
        Accepts an instance, a plain mapping or None and returns a validated instance
        (or None).
        """
        if options is None or isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def to_params(self) -> Dict[str, livecoin_utils.Scalar]:
        """
        :return: the fields that were set, keyed by their exchange parameter name
        """
        return self.model_dump(by_alias=True, exclude_none=True)


class LastTradesOptions(LivecoinOptions):
    # true: trades of the last minute, false: of the last hour
    minutes_or_hour: Optional[bool] = Field(default=None, alias="minutesOrHour")
    type: Optional[Literal["BUY", "SELL"]] = None


class OrderBookOptions(LivecoinOptions):
    group_by_price: Optional[bool] = Field(default=None, alias="groupByPrice")
    depth: Optional[int] = None


class UserTradesOptions(LivecoinOptions):
    currency_pair: Optional[str] = Field(default=None, alias="currencyPair")
    order_desc: Optional[bool] = Field(default=None, alias="orderDesc")
    limit: Optional[int] = None
    offset: Optional[int] = None


class ClientOrdersOptions(LivecoinOptions):
    currency_pair: Optional[str] = Field(default=None, alias="currencyPair")
    open_closed: Optional[Literal["ALL", "OPEN", "CLOSED", "CANCELLED", "NOT_CANCELLED", "PARTIALLY"]] = Field(
        default=None, alias="openClosed")
    issued_from: Optional[int] = Field(default=None, alias="issuedFrom")
    issued_to: Optional[int] = Field(default=None, alias="issuedTo")
    start_row: Optional[int] = Field(default=None, alias="startRow")
    end_row: Optional[int] = Field(default=None, alias="endRow")


class TransactionsOptions(LivecoinOptions):
    # comma separated, e.g. "BUY,SELL,DEPOSIT,WITHDRAWAL"
    types: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None


class PayeerOptions(LivecoinOptions):
    protect: Optional[int] = None
    protect_code: Optional[str] = None
    protect_period: Optional[int] = None


class PerfectMoneyOptions(LivecoinOptions):
    protect_code: Optional[str] = None
    protect_period: Optional[int] = None
