"""Run the blog API: ``python -m blog``."""
from __future__ import annotations

import uvicorn

from blog.app import create_app
from blog.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
