"""
Loader - Read bids from a delimited text file into a catalog.
"""

import csv
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from bidtree.catalog.catalog import Catalog
from bidtree.models.bid import Bid
from bidtree.models.exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvLayout:
    """
    Column positions of the bid fields in a CSV row.

    Defaults match the monthly eBid sales export.
    """

    title: int = 0
    bid_id: int = 1
    amount: int = 4
    fund: int = 8
    delimiter: str = ","
    has_header: bool = True

    @property
    def min_columns(self) -> int:
        return max(self.title, self.bid_id, self.amount, self.fund) + 1


@dataclass
class LoadReport:
    """
    Outcome of a load.

    Attributes:
        loaded: Number of bids inserted.
        skipped: Number of rows that were rejected.
        header: Header row, if the layout has one.
    """

    loaded: int = 0
    skipped: int = 0
    header: list[str] = field(default_factory=list)


def parse_amount(text: str, strip: str = "$,") -> float:
    """
    Convert a currency string such as "$1,250.00" to a float.

    Args:
        text: The raw amount text.
        strip: Characters removed before conversion.

    Raises:
        ValueError: If the remaining text is not a number.
    """
    cleaned = text.translate(str.maketrans("", "", strip)).strip()
    return float(cleaned)


def read_bids(
    path: str | Path, layout: CsvLayout = CsvLayout(), report: LoadReport | None = None
) -> Iterator[Bid]:
    """
    Yield a Bid for every well-formed row of the file.

    Rows that are too short or have an unparseable amount are logged and
    counted in `report` (when given) as skipped.

    Args:
        path: Path to the CSV file.
        layout: Column layout of the file.
        report: Optional report updated with the header and skipped rows.
    """
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f, delimiter=layout.delimiter)

        if layout.has_header:
            header = next(reader, [])
            if report is not None:
                report.header = header

        for row in reader:
            if not row:
                continue

            if len(row) < layout.min_columns:
                logger.warning(
                    f"Line {reader.line_num}: expected {layout.min_columns} columns, got {len(row)}"
                )
                if report is not None:
                    report.skipped += 1
                continue

            try:
                amount = parse_amount(row[layout.amount])
            except ValueError:
                logger.warning(f"Line {reader.line_num}: invalid amount {row[layout.amount]!r}")
                if report is not None:
                    report.skipped += 1
                continue

            yield Bid(
                bid_id=row[layout.bid_id].strip(),
                title=row[layout.title],
                fund=row[layout.fund],
                amount=amount,
            )


def load_bids(path: str | Path, catalog: Catalog, layout: CsvLayout = CsvLayout()) -> LoadReport:
    """
    Load every bid in the file into the catalog.

    Bids the catalog rejects (duplicate id, invalid amount, empty id) are
    logged and counted as skipped; loading continues with the next row.

    Args:
        path: Path to the CSV file.
        catalog: Catalog receiving the bids.
        layout: Column layout of the file.

    Returns:
        LoadReport with loaded/skipped counts and the header row.

    Raises:
        OSError: If the file cannot be opened.
        csv.Error: If the file is not valid CSV.
    """
    logger.info(f"Loading CSV file {path}")
    report = LoadReport()

    for bid in read_bids(path, layout, report):
        try:
            catalog.insert(bid)
        except (CatalogError, ValueError) as e:
            logger.warning(f"Skipping bid: {e}")
            report.skipped += 1
        else:
            report.loaded += 1

    logger.info(f"Loaded {report.loaded} bids, skipped {report.skipped}")
    return report
