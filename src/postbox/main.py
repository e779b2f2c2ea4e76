#!/usr/bin/env python3
"""Run the Postbox HTTP host with settings from the environment."""

from __future__ import annotations

import logging

import uvicorn

from postbox.api import create_app
from postbox.bootstrap import build_store
from postbox.config import Settings

logger = logging.getLogger("postbox")


def main() -> None:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = build_store(settings)
    app = create_app(
        store, identity_header=settings.identity_header, title="postbox"
    )

    logger.info("serving on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
