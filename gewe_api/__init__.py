"""Gewe 微信网关异步客户端"""
from .client import GeweClient
from .exceptions import (
    GeweDecodeError,
    GeweError,
    GeweHTTPStatusError,
    GeweTransportError,
    InvalidWxidError,
)
from .user import Wxid

__all__ = [
    "GeweClient",
    "GeweDecodeError",
    "GeweError",
    "GeweHTTPStatusError",
    "GeweTransportError",
    "InvalidWxidError",
    "Wxid",
]
