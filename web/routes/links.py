from quart import Blueprint, current_app, jsonify, request

import config
from songlink.managers import BadRequest
from songlink.services import songlink

router = Blueprint("links", __name__)


@router.route("/", methods=["GET"])
async def links():
    url = request.args.get("url")
    if not url:
        raise BadRequest()

    country = request.args.get("country") or config.SongLink.country

    song = await songlink.song(current_app.session, url, country)
    return jsonify(song.model_dump(exclude_none=True))
