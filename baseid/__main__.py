"""Run the Base ID API with uvicorn: ``python -m baseid``."""
from __future__ import annotations

import uvicorn

from baseid.app import create_app
from baseid.core.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
