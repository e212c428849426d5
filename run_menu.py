import logging
import os
import sys

from bidtree import Catalog
from bidtree.catalog.loader import load_bids
from bidtree.models.exceptions import InvalidRangeError
from console.formatting import Stopwatch, format_bid
from console.menu import Menu

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

DEFAULT_CSV_PATH = "eBid_Monthly_Sales_Dec_2016.csv"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    csv_path = args[0] if args else os.environ.get("BIDS_CSV", DEFAULT_CSV_PATH)
    default_bid_id = args[1] if len(args) > 1 else None

    menu = Menu()
    catalog = Catalog()
    register_options(menu, catalog, csv_path, default_bid_id)
    logger.debug(f"Registered options: {sorted(menu.options)}")
    menu.run()
    return 0


def register_options(menu: Menu, catalog: Catalog, csv_path: str, default_bid_id: str | None = None):

    def read_bid_id(m: Menu) -> str | None:
        bid_id = m.prompt("Enter bid id: ")
        if not bid_id:
            return default_bid_id
        return bid_id

    @menu.option(1, "Load Bids")
    def load(m: Menu) -> None:
        try:
            with Stopwatch() as watch:
                report = load_bids(csv_path, catalog)
        except OSError as e:
            m.write(f"Could not load {csv_path}: {e}")
            return

        m.write(" | ".join(report.header))
        m.write(f"{report.loaded} bids loaded, {report.skipped} skipped")
        for line in watch.report():
            m.write(line)

    @menu.option(2, "Display All Bids")
    def display_all(m: Menu) -> None:
        for bid in catalog.list_by_key():
            m.write(format_bid(bid))

    @menu.option(3, "Find Bid")
    def find(m: Menu) -> None:
        bid_id = read_bid_id(m)
        if bid_id is None:
            return

        with Stopwatch() as watch:
            bid = catalog.lookup(bid_id)

        if bid is not None:
            m.write(format_bid(bid))
        else:
            m.write(f"Bid Id {bid_id} not found.")
        for line in watch.report():
            m.write(line)

    @menu.option(4, "Find Bid by Amount")
    def find_by_amount(m: Menu) -> None:
        low = m.prompt_float("Enter low amount: ")
        if low is None:
            return
        high = m.prompt_float("Enter high amount: ")
        if high is None:
            return

        try:
            bids = catalog.range_by_amount(low, high)
        except InvalidRangeError as e:
            m.write(str(e))
            return

        count = 0
        for bid in bids:
            m.write(format_bid(bid))
            count += 1
        if count == 0:
            m.write(f"No bids between {low:g} and {high:g}.")

    @menu.option(5, "Remove Bid")
    def remove(m: Menu) -> None:
        bid_id = read_bid_id(m)
        if bid_id is None:
            return

        if catalog.remove(bid_id):
            m.write(f"Bid Id {bid_id} removed.")
        else:
            m.write(f"Bid Id {bid_id} not found.")

    @menu.option(6, "Display All Bids by Amount")
    def display_by_amount(m: Menu) -> None:
        for bid in catalog.list_by_amount():
            m.write(format_bid(bid))


if __name__ == "__main__":
    sys.exit(main())
