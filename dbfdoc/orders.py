"""Algorithmic order files: dictionaries, record layouts and the order table."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum

from .definitions import FieldDescriptor, FieldType
from .document import DbfDocument


class OrdStatus(IntEnum):
    """Status of a parent or child order."""

    INVALID = -1
    NEW = 0
    PARTIALFILL = 1
    FILLED = 2
    CANCELED = 4
    PENDINGCANCEL = 6
    REJECTED = 8
    SUSPEND = 9
    PENDINGNEW = 10


class Side(IntEnum):
    """Trade direction."""

    INVALID = -1
    BUY = 1
    SELL = 2
    CLOSE_BUY = 3
    SHORT_SELL = 4
    SHORT_BUY = 5
    CLOSE_SELL = 6
    FUTURE_OPEN_BUY = 101
    FUTURE_OPEN_SELL = 102
    FUTURE_CLOSE_BUY = 103
    FUTURE_CLOSE_SELL = 106


class OrdType(IntEnum):
    """Execution algorithm."""

    INVALID = -1
    TWAP_PLUS = 101
    VWAP_PLUS = 102
    TWAP_CORE = 103
    VWAP_CORE = 104
    POV_CORE = 105
    PASSTHRU = 201


class CxlType(IntEnum):
    """Cancellation state."""

    INVALID = -1
    NOTCANCELED = 0
    STOPTRADE = 1
    STOPINIT = 2
    EXPIRED = 3


class ExchangeType(IntEnum):
    """Exchange an instrument trades on."""

    SZ = 1
    SH = 2
    CFE = 3
    SHF = 4
    DCE = 5
    ZCE = 6
    INE = 7


@dataclass
class OrderAlgo:
    """A parent order as written to the order file."""

    external_id: str = ""
    client_name: str = ""
    symbol: str = ""
    side: int = 0
    order_qty: int = 0
    ord_type: int = 0
    eff_time: str = ""
    exp_time: str = ""
    lim_action: int = 0
    aft_action: int = 0
    algo_param: str = ""


@dataclass
class CancelOrderAlgo:
    """A request to cancel a parent order."""

    quote_id: str = ""
    cxl_type: int = 0


@dataclass
class ReportOrderAlgo:
    """A report on the state of a parent order."""

    external_id: str = ""
    quote_id: str = ""
    client_name: str = ""
    symbol: str = ""
    sec_type: int = 0
    sec_exch: int = 0
    side: int = 0
    trans_time: str = ""
    order_qty: int = 0
    ord_type: int = 0
    price: float = 0.0
    eff_time: str = ""
    exp_time: str = ""
    lim_action: int = 0
    aft_action: int = 0
    algo_param: str = ""
    cum_qty: int = 0
    leaves_qty: int = 0
    outsta_qty: int = 0
    avg_px: float = 0.0
    ord_status: int = 0
    cxl_type: int = 0
    basket_id: str = ""
    text: str = ""
    update_time: str = ""


@dataclass
class SubOrderAlgo:
    """A report on a child order."""

    external_id: str = ""
    quote_id: str = ""
    cl_ord_id: str = ""
    order_id: str = ""
    client_name: str = ""
    trans_time: str = ""
    ord_status: int = 0
    symbol: str = ""
    side: int = 0
    sec_type: int = 0
    sec_exch: int = 0
    price: float = 0.0
    ord_type: int = 0
    order_qty: int = 0
    cum_qty: int = 0
    leaves_qty: int = 0
    avg_px: float = 0.0
    update_time: str = ""
    text: str = ""


@dataclass
class ReportBalance:
    """An account balance report; amounts are text with three decimals."""

    client_name: str = ""
    en_balance: str = ""
    cr_balance: str = ""
    asset_amt: str = ""
    market_amt: str = ""
    update_time: str = ""


@dataclass
class ReportPosition:
    """A security position report."""

    client_name: str = ""
    exchange: str = ""
    symbol: str = ""
    current_qty: str = ""
    enable_qty: str = ""
    short_qty: str = ""
    update_time: str = ""


_ORDER_ALGO_LAYOUT = (
    ("EXTERNALID", FieldType.CHAR, 30),
    ("CLIENTNAME", FieldType.CHAR, 255),
    ("SYMBOL", FieldType.CHAR, 40),
    ("SIDE", FieldType.NUMERIC, 4),
    ("ORDERQTY", FieldType.NUMERIC, 4),
    ("ORDTYPE", FieldType.NUMERIC, 4),
    ("EFFTIME", FieldType.CHAR, 17),
    ("EXPTIME", FieldType.CHAR, 17),
    ("LIMACTION", FieldType.NUMERIC, 1),
    ("AFTACTION", FieldType.NUMERIC, 1),
    ("ALGOPARAM", FieldType.CHAR, 255),
)


def order_algo_fields() -> list[FieldDescriptor]:
    """Return the column layout of an order file."""
    return [
        FieldDescriptor(name=name, field_type=kind, length=length)
        for name, kind, length in _ORDER_ALGO_LAYOUT
    ]


class OrderAlgoDocument(DbfDocument):
    """An order file: a table with the fixed order layout."""

    def add_order_algo(self, order: OrderAlgo) -> None:
        """Append an order as a new record."""
        self.add_record([
            order.external_id,
            order.client_name,
            order.symbol,
            str(int(order.side)),
            str(int(order.order_qty)),
            str(int(order.ord_type)),
            order.eff_time,
            order.exp_time,
            str(int(order.lim_action)),
            str(int(order.aft_action)),
            order.algo_param,
        ])

    def create(self, filename: str | os.PathLike) -> None:  # type: ignore[override]
        """Start a new empty order file at ``filename``."""
        super().create(filename, order_algo_fields())