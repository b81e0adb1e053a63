"""
Service Launcher
================

Runs the application under uvicorn::

    python -m user_api
"""
import uvicorn

from user_api.core.config import get_settings


def main() -> None:
    """Start uvicorn with host/port taken from settings."""
    settings = get_settings()
    uvicorn.run(
        "user_api.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
