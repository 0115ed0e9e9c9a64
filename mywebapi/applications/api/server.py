"""Run the API with uvicorn until the process is stopped."""

import uvicorn
from loguru import logger

from mywebapi.applications.api.app import create_app
from mywebapi.dependencies import Container
from mywebapi.setup_logging import setup_logging


def serve(container: Container) -> None:
    config = container.config
    setup_logging(config.log_level(), config.log_file())

    certfile, keyfile = config.ssl_certfile(), config.ssl_keyfile()
    ssl_options: dict[str, str] = {}
    if certfile and keyfile:
        ssl_options = {"ssl_certfile": str(certfile), "ssl_keyfile": str(keyfile)}
    elif certfile or keyfile:
        logger.warning(
            "Both ssl_certfile and ssl_keyfile are needed; serving without TLS"
        )

    app = create_app(container)
    uvicorn.run(
        app,
        host=config.host(),
        port=config.port(),
        proxy_headers=True,
        **ssl_options,
    )


def main() -> None:
    serve(Container())


if __name__ == "__main__":
    main()
