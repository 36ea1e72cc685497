from typing import Any, Dict

import aiohttp
from aiohttp import ClientSession as Session
from aiohttp import ClientTimeout
from munch import DefaultMunch
from orjson import loads
from yarl import URL

import config
from .errors import SongLinkError, UpstreamError

__all__ = ("ClientSession",)


class ClientSession(Session):
    def __init__(self: "ClientSession", *args, **kwargs):
        super().__init__(
            timeout=ClientTimeout(total=config.Network.timeout),
            raise_for_status=True,
        )

    async def request(self: "ClientSession", *args, **kwargs) -> Any:
        args = list(args)
        args[1] = URL(args[1])

        args = tuple(args)

        try:
            response = await super().request(*args, **kwargs)
        except aiohttp.ClientResponseError as e:
            raise UpstreamError(e.status, e.message) from e

        if response.content_type not in ("application/json", "text/javascript"):
            await response.read()
            raise SongLinkError(f"Unexpected {response.content_type} response")

        data: Dict = await response.json(
            content_type=response.content_type, loads=loads
        )
        return DefaultMunch.fromDict(data)
