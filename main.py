import sys
import os

# Add src directory to python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from fanorona.main import main

if __name__ == "__main__":
    raise SystemExit(main())
