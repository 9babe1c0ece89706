"""Tests for the gilded-rose command line."""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from gilded_rose import create_app
from gilded_rose.catalog import Catalog, ItemAdded
from gilded_rose.cli.main import app, stock_default_inventory
from gilded_rose.core import Config
from gilded_rose.core.log import LOGGER_NAME

runner = CliRunner()


class TestSimulate:
    def test_prints_each_day(self):
        result = runner.invoke(app, ["simulate", "--days", "1"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "-------- day 0 --------"
        assert lines[1] == "name, sellIn, quality"
        assert "Aged Brie, 2, 0" in lines
        assert "-------- day 1 --------" in lines
        assert "Aged Brie, 1, 1" in lines
        assert "Backstage passes to a TAFKAL80ETC concert, 14, 21" in lines
        assert "Conjured Mana Cake, 2, 4" in lines
        assert "-------- day 2 --------" not in lines

    def test_negative_days_rejected(self):
        result = runner.invoke(app, ["simulate", "--days", "-1"])
        assert result.exit_code != 0


class TestQuote:
    def test_prints_lines_and_total(self):
        result = runner.invoke(
            app,
            [
                "quote",
                "--currency",
                "EUR",
                "--add",
                "Elixir of the Mongoose=10",
                "--add",
                "conjured mana cake=2",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Elixir of the Mongoose x10: 10.26 EUR each" in result.output
        assert "Conjured Mana Cake x2: 4.75 EUR each" in result.output
        assert "Total: 112.10 EUR" in result.output

    def test_currency_from_environment(self):
        result = runner.invoke(
            app,
            ["quote", "--add", "Conjured Mana Cake=1"],
            env={"GILDED_ROSE_CURRENCY": "USD"},
        )
        assert result.exit_code == 0, result.output
        assert "Total: 4.75 USD" in result.output

    def test_empty_cart(self):
        result = runner.invoke(app, ["quote", "--currency", "EUR"])
        assert result.exit_code == 0, result.output
        assert "Total: 0.00 EUR" in result.output

    def test_unknown_item(self):
        result = runner.invoke(app, ["quote", "--add", "Mithril Shirt=1"])
        assert result.exit_code == 1
        assert "Item not found" in result.output

    def test_invalid_amount(self):
        result = runner.invoke(app, ["quote", "--add", "Aged Brie=0"])
        assert result.exit_code == 1
        assert "amount must be > 0" in result.output

    def test_malformed_add(self):
        result = runner.invoke(app, ["quote", "--add", "Aged Brie"])
        assert result.exit_code == 2


class TestStockDefaultInventory:
    def test_goes_through_catalog_commands(self):
        application = create_app(Config())
        seen = []
        application.event_bus.subscribe(ItemAdded, seen.append)
        ids = stock_default_inventory(application)
        assert len(ids) == 9
        assert [event.item_id for event in seen] == ids
        catalog = application.container.resolve(Catalog)
        assert [item.id for item in catalog.get_items()] == ids
        assert catalog.collect_pending_events() == []


class TestLogLevel:
    @pytest.mark.parametrize(
        "args",
        [
            ["simulate", "--days", "1"],
            ["quote", "--currency", "EUR", "--add", "Aged Brie=1"],
        ],
    )
    def test_log_level_option(self, args):
        result = runner.invoke(app, [*args, "--log-level", "DEBUG"])
        assert result.exit_code == 0, result.output
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
