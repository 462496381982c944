"""Command-line entry point: ``python -m bookshelf`` serves the API with uvicorn."""

import uvicorn

from bookshelf.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
