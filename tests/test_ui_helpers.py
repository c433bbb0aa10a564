import json

from rental_library.book import Book
from rental_library.utils import ui_helpers
from rental_library.utils.ui_helpers import (
    OUTPUT_MODE_ENV,
    format_inventory,
    get_output_mode,
    print_inventory,
    print_stats_result,
    set_output_mode,
)


def _books():
    return [
        Book("Dune", "Frank Herbert", 10.0, 2.0),
        Book("Emma", "Jane Austen", 7.5, 1.25, is_rented=True),
    ]

def test_format_inventory_lines():
    text = format_inventory(_books(), 1)
    lines = text.split("\n")
    assert lines[0] == "Inventory:"
    assert lines[1] == f"{'Dune':<30} {'Frank Herbert':<20} Price: $10.00 Rent: $2.00 Status: Available"
    assert lines[2] == f"{'Emma':<30} {'Jane Austen':<20} Price: $7.50 Rent: $1.25 Status: Rented"
    assert lines[3] == ""
    assert lines[4] == "Total Books Available: 1"

def test_format_empty_inventory():
    assert format_inventory([], 0) == "Inventory:\n\nTotal Books Available: 0"

def test_format_uses_currency_setting(monkeypatch):
    monkeypatch.setattr(ui_helpers.settings, "currency_symbol", "€")
    assert "Price: €10.00 Rent: €2.00" in format_inventory(_books()[:1], 1)

def test_output_mode_switching(monkeypatch):
    assert get_output_mode() == "plain"
    set_output_mode("JSON")
    assert get_output_mode() == "json"
    set_output_mode("xml")
    assert get_output_mode() == "json"

def test_unknown_env_mode_falls_back_to_plain(monkeypatch):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "yaml")
    assert get_output_mode() == "plain"

def test_print_inventory_plain(capsys):
    print_inventory(_books(), 1)
    out = capsys.readouterr().out
    assert out.startswith("Inventory:\n")
    assert "Total Books Available: 1" in out

def test_print_inventory_json(monkeypatch, capsys):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "json")
    print_inventory(_books(), 1)
    payload = json.loads(capsys.readouterr().out)
    assert payload["available_count"] == 1
    assert [b["title"] for b in payload["books"]] == ["Dune", "Emma"]
    assert payload["books"][1]["is_rented"] is True

def test_print_inventory_rich(monkeypatch, capsys):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "rich")
    print_inventory(_books(), 1)
    out = capsys.readouterr().out
    assert "Dune" in out
    assert "Total Books Available: 1" in out

def test_print_stats_plain(capsys):
    print_stats_result({"total_books": 3, "available_count": 2, "unrented_books": 2,
                        "rented_books": 1, "unique_authors": 3})
    out = capsys.readouterr().out
    assert "Total Books: 3" in out
    assert "Total Books Available: 2" in out
    assert "Rented Books: 1" in out

def test_print_stats_json(monkeypatch, capsys):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "json")
    print_stats_result({"total_books": 1, "available_count": 0})
    assert json.loads(capsys.readouterr().out) == {"total_books": 1, "available_count": 0}

def test_print_stats_empty(capsys):
    print_stats_result({})
    assert "No statistics available." in capsys.readouterr().out
