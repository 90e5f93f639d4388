import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hello_service.clock import main


if __name__ == "__main__":
    raise SystemExit(main())
