"""
Interest Ledger

Per-account transaction ledgers with a monthly statement engine that prorates
interest across a time-varying table of rate rules. All money math uses Decimal.
"""

__version__ = "1.0.0"
