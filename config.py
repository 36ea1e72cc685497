from datetime import timedelta

cache: str = "mem://"


class Web:
    host: str = "0.0.0.0"
    port: int = 8080


class Network:
    timeout: int = 15


class SongLink:
    endpoint: str = "https://api.song.link/v1-alpha.1/links"
    provider: str = "spotify"
    country: str = "US"
    ttl: timedelta = timedelta(minutes=60)


class Cors:
    methods: list[str] = ["GET"]
