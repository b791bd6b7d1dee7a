#!/usr/bin/env python3
"""
Bank Ledger Entry Point

Starts the interactive console with the demo accounts loaded.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from bank_ledger.cli import main


if __name__ == "__main__":
    print("🏦 Starting Bank Ledger...")
    print("💰 All financial calculations use Decimal precision")
    print()

    try:
        sys.exit(main(sys.argv[1:]))
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
