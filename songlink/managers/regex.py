from re import compile

__all__ = ("NOSTATUS_ORIGIN", "LOCALHOST_ORIGIN")

NOSTATUS_ORIGIN = compile(r"https://nostatus.*\.vercel\.app\Z")
LOCALHOST_ORIGIN = compile(r".*localhost:")
