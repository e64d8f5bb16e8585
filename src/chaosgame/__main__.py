"""
Run with: python -m chaosgame
"""
from chaosgame.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
