"""
Tests for the CLI functionality
"""

import pytest
from typer.testing import CliRunner
from unittest.mock import patch

from checkout.cli import app
from checkout.exceptions import CheckoutError


class TestCLI:
    """Test cases for CLI functionality"""

    def setup_method(self):
        """Set up test fixtures"""
        self.runner = CliRunner()

    def test_version_option(self):
        """Test --version option"""
        result = self.runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "Checkout version" in result.stdout

    def test_help_option(self):
        """Test --help option"""
        result = self.runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "codes" in result.stdout.lower()
        assert "Product codes to scan" in result.stdout

    def test_no_arguments(self):
        """Test an empty basket totals zero"""
        result = self.runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Total Price: 0.00€" in result.stdout

    @pytest.mark.parametrize("codes, expected", [
        (["VOUCHER"], "5.00"),
        (["VOUCHER", "TSHIRT", "VOUCHER"], "25.00"),
        (["VOUCHER", "TSHIRT", "MUG"], "32.50"),
        (["TSHIRT", "TSHIRT", "TSHIRT", "VOUCHER", "TSHIRT"], "81.00"),
        (["VOUCHER", "TSHIRT", "VOUCHER", "VOUCHER", "MUG", "TSHIRT", "TSHIRT"], "74.50"),
    ])
    def test_totals(self, codes, expected):
        """Test printed totals for the demo catalog"""
        result = self.runner.invoke(app, codes)
        assert result.exit_code == 0
        assert f"Total Price: {expected}€" in result.stdout

    def test_unknown_product(self):
        """Test an unknown code aborts without a total"""
        result = self.runner.invoke(app, ["VOUCHER", "FAKE", "MUG"])
        assert result.exit_code == 1
        assert "Unknown product FAKE" in result.stdout
        assert "Total Price" not in result.stdout

    def test_itemized_option(self):
        """Test --itemized prints the receipt"""
        result = self.runner.invoke(app, ["--itemized", "VOUCHER", "MUG", "VOUCHER"])
        assert result.exit_code == 0
        assert "Receipt" in result.stdout
        assert "MUG" in result.stdout
        assert "Total Price: 12.50€" in result.stdout

    def test_currency_option(self):
        """Test --currency option"""
        result = self.runner.invoke(app, ["--currency", "$", "MUG"])
        assert result.exit_code == 0
        assert "Total Price: 7.50$" in result.stdout

    def test_verbose_option(self):
        """Test --verbose option"""
        result = self.runner.invoke(app, ["--verbose", "MUG"])
        assert result.exit_code == 0
        assert "Total Price: 7.50€" in result.stdout

    def test_checkout_error(self):
        """Test library errors exit with status 1"""
        with patch('checkout.cli.demo_catalog', side_effect=CheckoutError("broken catalog")):
            result = self.runner.invoke(app, ["MUG"])
        assert result.exit_code == 1
        assert "Total Price" not in result.stdout

    def test_unexpected_error(self):
        """Test unexpected errors exit with status 1"""
        with patch('checkout.cli.Checkout', side_effect=RuntimeError("boom")):
            result = self.runner.invoke(app, ["--verbose", "MUG"])
        assert result.exit_code == 1
