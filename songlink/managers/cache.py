from cashews import cache

import config

cache.setup(config.cache)

__all__ = ("cache",)
