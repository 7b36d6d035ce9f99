#!/usr/bin/env python3
"""Interactive console entry point: python -m interest_ledger"""

from .config import get_config
from .console import BankConsole
from .logging_config import setup_logging
from .system import BankingSystem


def main():
    """Start the console menu"""
    config = get_config()
    setup_logging(config.log_level, log_format=config.log_format, log_file=config.log_file)
    
    try:
        BankConsole(BankingSystem(config)).run()
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
