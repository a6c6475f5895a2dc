#!/usr/bin/env python3
"""Run the FastAPI server directly."""

import uvicorn

from bgin_server.config import get_settings


def main():
    """Run the FastAPI server with auto-reload for local development."""
    settings = get_settings()

    uvicorn.run(
        "bgin_server.app:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
