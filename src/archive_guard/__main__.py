"""Entry point for standalone backend process."""

import sys

import uvicorn

from archive_guard.config import settings


def main() -> None:
    uvicorn.run(
        "archive_guard.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=not getattr(sys, "frozen", False),
    )


if __name__ == "__main__":
    main()
