"""CSV export of the records shown on an index page.

Output format:
- header row, then one row per record, joined with "\\n"; headers are
  bare unless they hold a comma or quote
- string and date cells are always quoted with internal quotes doubled
- id/number cells are bare, currency cells have two decimals
- dates render as MM/DD/YYYY; missing or unparsable dates are empty
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from backoffice.core.dates import format_display_date

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv;charset=utf-8"

_CENTS = Decimal("0.01")


class ColumnKind(str, Enum):
    ID = "id"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    CURRENCY = "currency"


@dataclass(frozen=True)
class ColumnSpec:
    """One exported column: header text, where the value comes from, and how to format it."""

    header: str
    source: Union[str, Callable[[Any], Any]]
    kind: ColumnKind = ColumnKind.STRING

    def value(self, record: Any) -> Any:
        if callable(self.source):
            return self.source(record)
        if isinstance(record, dict):
            return record.get(self.source)
        return getattr(record, self.source, None)


def quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def format_header(header: str) -> str:
    return quote(header) if ("," in header or '"' in header) else header


def format_currency(value: Any) -> str:
    if value is None or value == "":
        return "0.00"
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return "0.00"
    if not amount.is_finite():
        return "0.00"
    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_cell(value: Any, kind: ColumnKind) -> str:
    if kind in (ColumnKind.ID, ColumnKind.NUMBER):
        return "" if value is None else str(value)
    if kind == ColumnKind.DATE:
        return quote(format_display_date(value))
    if kind == ColumnKind.CURRENCY:
        return format_currency(value)
    if isinstance(value, Enum):
        value = value.value
    return quote("" if value is None else str(value))


class CSVExporter:
    """Turns uniform records into CSV text given a list of ColumnSpec."""

    def header(self, columns: Sequence[ColumnSpec]) -> str:
        return ",".join(format_header(column.header) for column in columns)

    def format_row(self, record: Any, columns: Sequence[ColumnSpec]) -> str:
        return ",".join(format_cell(column.value(record), column.kind) for column in columns)

    def export(self, records: Iterable[Any], columns: Sequence[ColumnSpec]) -> str:
        lines = [self.header(columns)]
        for index, record in enumerate(records):
            try:
                lines.append(self.format_row(record, columns))
            except Exception as e:
                logger.warning(f"[CSV] Dropping row {index}: {e}")
        return "\n".join(lines)


def export_filename(entity: str, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{entity}-{today.isoformat()}.csv"
