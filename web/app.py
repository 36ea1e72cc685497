import logging
from importlib import import_module
from pathlib import Path
from re import Pattern
from typing import Iterable, Union

from quart import Quart, jsonify, request
from quart_cors import cors
from werkzeug.exceptions import HTTPException

import config
from songlink.managers import (
    LOCALHOST_ORIGIN,
    NOSTATUS_ORIGIN,
    ClientSession,
    SongLinkError,
)

logger = logging.getLogger(__name__)

ORIGINS = (NOSTATUS_ORIGIN, LOCALHOST_ORIGIN)


def create_app(origins: Iterable[Union[str, Pattern]] = ORIGINS) -> Quart:
    """Build the proxy app, only answering CORS requests from `origins`"""

    app = Quart(__name__)
    app = cors(app, allow_origin=set(origins), allow_methods=config.Cors.methods)

    for route in sorted((Path(__file__).parent / "routes").glob("*.py")):
        if route.stem.startswith("_"):
            continue

        router = import_module(f"web.routes.{route.stem}").router
        app.register_blueprint(router)
        logger.debug("Registered %s", route.stem)

    @app.before_serving
    async def open_session():
        app.session = ClientSession()

    @app.after_serving
    async def close_session():
        await app.session.close()

    @app.errorhandler(SongLinkError)
    async def songlink_error(error: SongLinkError):
        return (
            jsonify(
                {
                    "error": f"{error.status}: {error.reason}",
                    "message": error.message,
                }
            ),
            error.status,
        )

    @app.errorhandler(404)
    async def not_found(error):
        return (
            jsonify(
                {
                    "error": "404: Not Found",
                    "message": "The requested resource could not be found.",
                }
            ),
            404,
        )

    @app.errorhandler(405)
    async def invalid_method(error):
        return (
            jsonify(
                {
                    "error": "405: Invalid method",
                    "message": f"The requested resource doesn't support the {request.method} method.",
                }
            ),
            405,
        )

    @app.errorhandler(HTTPException)
    async def http_error(error: HTTPException):
        return (
            jsonify(
                {
                    "error": f"{error.code}: {error.name}",
                    "message": error.description,
                }
            ),
            error.code,
        )

    @app.errorhandler(Exception)
    async def internal_server_error(error):
        logger.exception("Unhandled error on %s", request.path, exc_info=error)
        return (
            jsonify(
                {
                    "error": "500: Internal Server Error",
                    "message": "An internal server error occurred.",
                }
            ),
            500,
        )

    return app


app = create_app()
