"""Bundled ISO 4217 currency data (MoneyData.csv)."""
