from ._segments import (
    decode_segment,
    decode_unverified,
    encode_segment,
    get_unverified_header,
    split_token,
)

__all__ = [
    "decode_segment",
    "decode_unverified",
    "encode_segment",
    "get_unverified_header",
    "split_token",
]
