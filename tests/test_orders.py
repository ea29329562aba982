import pytest

from dbfdoc.document import DbfError
from dbfdoc.orders import (
    OrderAlgo,
    OrderAlgoDocument,
    OrdType,
    Side,
    order_algo_fields,
)


def _sample_order(**changes):
    values = dict(
        external_id="ORD20250424001",
        client_name="TESTCLIENT",
        symbol="000001",
        side=Side.BUY,
        order_qty=1000,
        ord_type=OrdType.TWAP_PLUS,
        eff_time="20250424093059000",
        exp_time="20250424150000000",
        lim_action=1,
        aft_action=0,
        algo_param="",
    )
    values.update(changes)
    return OrderAlgo(**values)


def test_field_layout_matches_order_file():
    fields = order_algo_fields()
    assert [f.name for f in fields] == [
        "EXTERNALID", "CLIENTNAME", "SYMBOL", "SIDE", "ORDERQTY", "ORDTYPE",
        "EFFTIME", "EXPTIME", "LIMACTION", "AFTACTION", "ALGOPARAM",
    ]
    assert [f.length for f in fields] == [30, 255, 40, 4, 4, 4, 17, 17, 1, 1, 255]
    assert [f.field_type for f in fields if f.name in ("SIDE", "ORDERQTY")] == ["N", "N"]


def test_dictionary_codes_are_stored_in_order_file(tmp_path):
    doc = OrderAlgoDocument()
    doc.create(tmp_path / "orders.dbf")
    doc.add_order_algo(
        _sample_order(side=Side.FUTURE_CLOSE_SELL, ord_type=OrdType.PASSTHRU)
    )
    values = doc.read_record(0)
    assert int(values[3]) == 106
    assert int(values[5]) == 201


def test_create_writes_empty_table(tmp_path):
    path = tmp_path / "orders.dbf"
    doc = OrderAlgoDocument()
    doc.create(path)
    reopened = OrderAlgoDocument()
    reopened.open(path)
    assert reopened.record_count == 0
    assert reopened.header.record_size == sum(f.length for f in order_algo_fields()) + 1


def test_add_order_round_trip(tmp_path):
    path = tmp_path / "orders.dbf"
    doc = OrderAlgoDocument()
    doc.create(path)
    order = _sample_order()
    doc.add_order_algo(order)
    doc.save()

    reopened = OrderAlgoDocument()
    reopened.open(path)
    assert reopened.record_count == 1
    values = reopened.read_record(0)
    assert values[0] == order.external_id
    assert values[1] == order.client_name
    assert values[2] == order.symbol
    assert int(values[3]) == Side.BUY
    assert int(values[4]) == order.order_qty
    assert int(values[5]) == OrdType.TWAP_PLUS
    assert values[6] == order.eff_time
    assert values[7] == order.exp_time
    assert int(values[8]) == order.lim_action
    assert int(values[9]) == order.aft_action
    assert values[10] == ""


def test_long_text_is_cut_to_field_length(tmp_path):
    doc = OrderAlgoDocument()
    doc.create(tmp_path / "orders.dbf")
    long_id = "X" * 50
    doc.add_order_algo(_sample_order(external_id=long_id))
    assert doc.read_record(0)[0] == long_id[:30]


def test_add_order_without_layout_fails():
    doc = OrderAlgoDocument()
    with pytest.raises(DbfError):
        doc.add_order_algo(_sample_order())