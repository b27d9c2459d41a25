import os
import sys
from pathlib import Path

# Ensure src is importable when running from a checkout
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from price_gateway.api.main import main


if __name__ == "__main__":
    print(f"Starting Price Gateway API on {os.getenv('HOST', 'localhost')}:{os.getenv('PORT', '3000')}...")
    try:
        main()
    except KeyboardInterrupt:
        print("\nAPI stopped.")
