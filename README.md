# dbfdoc

A small library for dBASE III style `.dbf` table files. It opens an existing
table into memory, reads, modifies, adds and deletes records, creates new
tables from field descriptors, and saves them back to disk. It also knows the
layout of algorithmic-order files (`OrderAlgo` and related records) used for
order exchange.

## Install

```
pip install .
```

## Library use

```python
from dbfdoc.orders import OrderAlgo, OrderAlgoDocument, Side, OrdType

doc = OrderAlgoDocument()
doc.create("OrderAlgo_20250424.dbf")   # writes an empty table with the order layout
doc.add_order_algo(OrderAlgo(
    external_id="ORD20250424001",
    client_name="10000001",
    symbol="000001",
    side=Side.BUY,
    order_qty=1000,
    ord_type=OrdType.TWAP_PLUS,
    eff_time="20250424093059000",
    exp_time="20250424150000000",
    lim_action=1,
    aft_action=0,
))
doc.save()
```

### Modules

- `dbfdoc.definitions` – the on-disk `Header` and `FieldDescriptor` (each with
  `pack()` and `from_bytes()`), the `DbfVersion`, `LanguageDriver` and
  `FieldType` enums, `parse_date` / `format_date` for the three-byte header
  date, and `field_type_name` for a readable type name.
- `dbfdoc.document` – `DbfDocument`, the in-memory table, with `open`,
  `save`, `save_as`, `read_record`, `modify_record`, `add_record`,
  `delete_record`, `create`, `header_summary` and the `record_count`
  property.
  - `open` raises `OSError` if the file cannot be read and `DbfError` if its
    header or size does not check out.
  - `read_record` returns the values as strings, with trailing spaces removed
    from character fields, and an empty list for a deleted record.
  - An out-of-range index raises `IndexError`. A wrong number of values, or
    modifying a deleted record, raises `DbfError`.
  - Values longer than their field are cut, and shorter ones padded with
    spaces.
- `dbfdoc.orders` – the dictionary enums (`OrdStatus`, `Side`, `OrdType`,
  `CxlType`, `ExchangeType`), the record dataclasses (`OrderAlgo`,
  `CancelOrderAlgo`, `ReportOrderAlgo`, `SubOrderAlgo`, `ReportBalance`,
  `ReportPosition`), `order_algo_fields()` and `OrderAlgoDocument`, whose
  `create(filename)` and `add_order_algo(order)` use the order layout.
- `dbfdoc.csvexport` – `CsvWriter`, with `set_separator` (a value starting
  with `t` selects a tab), `write_header` and `write_line`. `write_line` takes
  a record without its deletion flag.
- `dbfdoc.codepages` – `cp850_convert` maps code page 850 letters to
  Latin-1. `count_umlauts` counts German special letters.
- `dbfdoc.textgraph` – `draw_line`, a dashed rule with `+` at given positions.
- `dbfdoc.tools` – `split_buffer`, `strip_spaces` and `today_string`
  (YYYYMMDD).
- `dbfdoc.cli` – `version_name`, `field_table`, `file_info`,
  `format_order_record` and the `main` entry point.

## Command line

```
dbfdoc OrderAlgo_20250424.dbf
```

This opens an order file and prints `Existing records:`, followed by one
labelled line per record. A deleted record prints as
`Empty or deleted record`.

If the file does not exist, it is created as an empty order file. Without a
file name, `CancelOrderAlgo_20250424.dbf` is used.

```
dbfdoc --info OrderAlgo_20250424.dbf
```

With `--info`, the command prints different output and no records. It shows
the version, the last-update date, the record count, the header length, the
record length and the column count. It then shows a table of the columns.

## What it does not do

The command only lists records or shows file information. It does not
convert tables: there is no CSV output from the command line (use `CsvWriter`
from code), and there is no SQL or dBASE-to-dBASE export. Memo files and index
files are not read or written. Tables are loaded wholly into memory.

## Tests

```
pip install .[test]
pytest
```