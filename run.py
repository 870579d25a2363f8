#!/usr/bin/env python3
"""Run script for userapi."""

import uvicorn

from userapi.config import configure_logging, load_settings

if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "userapi.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )
