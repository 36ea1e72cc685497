import logging

import config
from songlink.managers.logging import Formatter
from web.app import app


def setup_logging(level: int = logging.INFO) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(Formatter())

    logging.basicConfig(level=level, handlers=[handler])


if __name__ == "__main__":
    setup_logging()
    app.run(host=config.Web.host, port=config.Web.port)
