import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import uvicorn

from hello_service.api.main import app
from hello_service.config import get_api_settings
from hello_service.logging import setup_logging


def main() -> None:
    setup_logging()
    settings = get_api_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
