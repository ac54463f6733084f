"""
Financial Calculation Engine

Pure projection engines behind the personal-finance calculators.
Every engine is a deterministic function of its inputs.
"""

from finance_app.calculations import amortization, sip, inflation, fire, rent_vs_buy, tax, dashboard

__all__ = ["amortization", "sip", "inflation", "fire", "rent_vs_buy", "tax", "dashboard"]
