"""Tests for CSV export formatting."""
import csv
import io
import logging
from datetime import date
from decimal import Decimal

from backoffice.services.csv_export import (
    CSVExporter,
    ColumnKind,
    ColumnSpec,
    export_filename,
    format_currency,
)

COLUMNS = (
    ColumnSpec("ID", "id", ColumnKind.ID),
    ColumnSpec("Tenant Name", "tenant_name"),
    ColumnSpec("Move-In Date", "move_in_date", ColumnKind.DATE),
    ColumnSpec("Owes", "owes", ColumnKind.CURRENCY),
)


def parse(text):
    return list(csv.reader(io.StringIO(text)))


class TestExport:
    def test_header_and_rows(self):
        records = [
            {"id": 1, "tenant_name": "Jane Doe", "move_in_date": date(2024, 1, 5), "owes": Decimal("1500")},
            {"id": 2, "tenant_name": "John Smith", "move_in_date": "2024-02-10", "owes": 12.5},
        ]

        text = CSVExporter().export(records, COLUMNS)

        assert text.splitlines()[0] == "ID,Tenant Name,Move-In Date,Owes"
        assert text.splitlines()[1] == '1,"Jane Doe","01/05/2024",1500.00'
        assert parse(text)[2] == ["2", "John Smith", "02/10/2024", "12.50"]

    def test_quotes_are_doubled(self):
        text = CSVExporter().export([{"id": 7, "tenant_name": 'Ann "Annie" Lee, Jr.'}], COLUMNS)

        assert '"Ann ""Annie"" Lee, Jr."' in text
        assert parse(text)[1][1] == 'Ann "Annie" Lee, Jr.'

    def test_missing_and_unparsable_dates_are_empty(self):
        records = [
            {"id": 1, "move_in_date": None},
            {"id": 2, "move_in_date": "not a date"},
        ]

        rows = parse(CSVExporter().export(records, COLUMNS))

        assert rows[1][2] == ""
        assert rows[2][2] == ""

    def test_missing_currency_defaults_to_zero(self):
        rows = parse(CSVExporter().export([{"id": 1}], COLUMNS))

        assert rows[1][3] == "0.00"

    def test_no_records_gives_header_only(self):
        assert CSVExporter().export([], COLUMNS) == "ID,Tenant Name,Move-In Date,Owes"

    def test_failing_row_is_dropped(self, caplog):
        def explode(record):
            if record["id"] == 2:
                raise KeyError("vendor")
            return "ok"

        columns = (ColumnSpec("ID", "id", ColumnKind.ID), ColumnSpec("Vendor", explode))
        records = [{"id": 1}, {"id": 2}, {"id": 3}]

        with caplog.at_level(logging.WARNING):
            rows = parse(CSVExporter().export(records, columns))

        assert [row[0] for row in rows[1:]] == ["1", "3"]
        assert "[CSV]" in caplog.text

    def test_reads_attributes_of_objects(self):
        class Record:
            id = 4
            tenant_name = "Obj"
            move_in_date = None
            owes = None

        assert CSVExporter().format_row(Record(), COLUMNS) == '4,"Obj","",0.00'


class TestFormatting:
    def test_currency_rounds_to_cents(self):
        assert format_currency(Decimal("10.005")) == "10.01"
        assert format_currency("abc") == "0.00"
        assert format_currency(0) == "0.00"

    def test_header_with_comma_or_quote_is_quoted(self):
        columns = (ColumnSpec("ID", "id", ColumnKind.ID), ColumnSpec('Paid, "net"', "paid"))

        header = CSVExporter().header(columns)

        assert header == 'ID,"Paid, ""net"""'
        assert parse(header)[0] == ["ID", 'Paid, "net"']

    def test_export_filename(self):
        assert export_filename("payments", date(2024, 3, 9)) == "payments-2024-03-09.csv"
