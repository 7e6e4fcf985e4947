from typing import Any, TypedDict


class ClaimDict(TypedDict, total=False):
    iat: int
    exp: int
    iss: str
    sub: str
    aud: str
    nbf: str | int
    jti: str
    data: dict[str, Any]
