#!/usr/bin/env python3
"""
Interest Ledger API Entry Point

Starts the FastAPI server for the ledger and statement engine.
"""

import sys

from interest_ledger.api import run_server
from interest_ledger.config import get_config


if __name__ == "__main__":
    config = get_config()
    print(f"🏦 Starting {config.bank_name} ledger API...")
    print(f"🌐 API available at: http://localhost:{config.api_port}")
    print(f"📚 Documentation at: http://localhost:{config.api_port}/docs")
    print()
    
    try:
        run_server()
    except KeyboardInterrupt:
        print("\n👋 Shutting down ledger API...")
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        sys.exit(1)
