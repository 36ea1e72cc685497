import logging
from typing import Mapping, Optional

from yarl import URL

import config
from songlink.managers import ClientSession, cache
from songlink.models import Song, SongLinkEntity, SongLinkResponse

logger = logging.getLogger(__name__)


def build_url(
    url: str, country: str, endpoint: str = config.SongLink.endpoint
) -> URL:
    """Build the song.link lookup URL for a share URL"""

    return URL(endpoint).with_query(
        {
            "url": url,
            "userCountry": country,
            "songIfSingle": "true",
        }
    )


def find_entity(
    entities: Mapping[str, SongLinkEntity], provider: str
) -> Optional[SongLinkEntity]:
    """Return the first entity from `provider`, in the order song.link sent them"""

    return next(
        (entity for entity in entities.values() if entity.provider == provider),
        None,
    )


def extract(
    response: SongLinkResponse, provider: str = config.SongLink.provider
) -> Song:
    """Normalize a song.link response.

    The preferred provider's metadata wins, then the entity song.link marks
    as primary. Without either only the page URL is returned.
    """

    entity = find_entity(response.entities, provider) or response.entities.get(
        response.id
    )
    if not entity:
        return Song(url=response.url)

    return Song(
        url=response.url,
        title=entity.title,
        artist=entity.artist,
    )


async def song(
    session: ClientSession, url: str, country: str = config.SongLink.country
) -> Song:
    """Look up a share URL on song.link"""

    return await lookup(session, build_url(url, country))


@cache(ttl=config.SongLink.ttl, key="songlink:{query}")
async def lookup(session: ClientSession, query: URL) -> Song:
    # the encoded query is unique per (url, country)
    logger.info("Forwarding request to %s", query)

    data = await session.request("GET", query)
    result = extract(SongLinkResponse.model_validate(data))

    logger.info("Song data for %s: %r", query.query["url"], result)
    return result
