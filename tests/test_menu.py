"""
Tests for the interactive menu layer.
"""

import io

import pytest

from bidtree import Bid, Catalog
from console.formatting import Stopwatch, format_bid
from console.menu import Menu
from run_menu import main, register_options


def run_session(catalog, lines, csv_path="missing.csv", default_bid_id=None):
    """Run a menu session over scripted input and return the output."""
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    menu = Menu(stdin=stdin, stdout=stdout)
    register_options(menu, catalog, csv_path, default_bid_id)
    menu.run()
    return stdout.getvalue()


class TestFormatting:
    """Tests for presentation helpers."""

    def test_format_bid(self):
        bid = Bid("98109", title="Desk", fund="General Fund", amount=15.5)
        assert format_bid(bid) == "98109: Desk | 15.5 | General Fund"

    def test_stopwatch(self):
        with Stopwatch() as watch:
            sum(range(1000))

        assert watch.ticks >= 0
        assert watch.seconds == watch.ticks / 1_000_000_000
        assert watch.report()[0].startswith("time: ")
        assert watch.report()[1].endswith(" seconds")


class TestMenu:
    """Tests for the Menu dispatcher."""

    def test_reserved_exit_choice(self):
        menu = Menu(stdin=io.StringIO(), stdout=io.StringIO())
        with pytest.raises(ValueError):
            menu.option(9, "Not allowed")

    def test_invalid_input_reprompts(self):
        """Test non-integer input is rejected until a number is entered."""
        calls = []
        stdout = io.StringIO()
        menu = Menu(stdin=io.StringIO("abc\n1\n9\n"), stdout=stdout)

        @menu.option(1, "Record")
        def record(m):
            calls.append(1)

        menu.run()

        assert calls == [1]
        output = stdout.getvalue()
        assert "Invalid input, please re-enter a valid choice: " in output
        assert "  1. Record" in output
        assert output.endswith("Good bye.\n")

    def test_unknown_choice(self):
        stdout = io.StringIO()
        Menu(stdin=io.StringIO("7\n9\n"), stdout=stdout).run()
        assert "Unknown choice 7." in stdout.getvalue()

    def test_end_of_input_exits(self):
        stdout = io.StringIO()
        Menu(stdin=io.StringIO(""), stdout=stdout).run()
        assert stdout.getvalue().endswith("Good bye.\n")


class TestBidOptions:
    """Tests for the registered bid options."""

    def test_load_and_display(self, csv_path, write_csv, row):
        """Test loading a file and listing bids by id and by amount."""
        write_csv([row("Lamp", "2", "$30"), row("Desk", "1", "$50")])
        catalog = Catalog()

        output = run_session(catalog, ["1", "2", "6", "9"], csv_path=csv_path)

        assert "2 bids loaded, 0 skipped" in output
        assert "clock ticks" in output
        by_id = output.index("1: Desk | 50 | General Fund")
        assert output.index("2: Lamp | 30 | General Fund") > by_id
        assert output.rindex("2: Lamp | 30 | General Fund") < output.rindex("1: Desk | 50 | General Fund")
        assert len(catalog) == 2

    def test_load_missing_file(self, temp_dir):
        output = run_session(Catalog(), ["1", "9"], csv_path=f"{temp_dir}/missing.csv")
        assert "Could not load" in output

    def test_find(self):
        """Test finding present and absent bids."""
        catalog = Catalog([Bid("A1", title="Desk", fund="F", amount=500)])

        output = run_session(catalog, ["3", "A1", "3", "Z9", "9"])

        assert "A1: Desk | 500 | F" in output
        assert "Bid Id Z9 not found." in output
        assert "time: " in output

    def test_find_uses_default_id(self):
        catalog = Catalog([Bid("98109", amount=1)])
        output = run_session(catalog, ["3", "", "9"], default_bid_id="98109")
        assert "98109:  | 1 | " in output

    def test_find_by_amount(self):
        """Test amount range listing and range errors."""
        catalog = Catalog(
            [Bid("A1", amount=500), Bid("B2", amount=300), Bid("C3", amount=750)]
        )

        output = run_session(catalog, ["4", "300", "500", "4", "x", "800", "900", "4", "10", "1", "9"])

        assert output.index("B2:") < output.index("A1:")
        assert "C3:" not in output
        assert "Invalid number, please re-enter." in output
        assert "No bids between 800 and 900." in output
        assert "Invalid amount range" in output

    def test_remove(self):
        catalog = Catalog([Bid("A1", amount=5)])

        output = run_session(catalog, ["5", "A1", "5", "A1", "9"])

        assert "Bid Id A1 removed." in output
        assert "Bid Id A1 not found." in output
        assert len(catalog) == 0


class TestMain:
    """Tests for the entry point."""

    def test_main(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
        assert main(["missing.csv"]) == 0
