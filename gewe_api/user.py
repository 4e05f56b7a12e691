"""微信用户标识"""
import re
from dataclasses import dataclass
from typing import Union

from .exceptions import InvalidWxidError

WXID_PATTERN = re.compile(r"wxid_[A-Za-z0-9]+")


@dataclass(frozen=True)
class Wxid:
    """
    联系人 wxid

    构造时校验格式（wxid_ 前缀 + 字母数字后缀），之后不可变。
    仅作为不透明值嵌入请求体或比较相等，不做任何拆解。
    """

    value: str

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise InvalidWxidError(self.value)

    @staticmethod
    def is_valid(value: object) -> bool:
        """判断字符串是否为合法的 wxid"""
        return isinstance(value, str) and WXID_PATTERN.fullmatch(value) is not None

    @classmethod
    def parse(cls, value: Union["Wxid", str]) -> "Wxid":
        """
        解析 wxid

        已是 Wxid 时原样返回，字符串则校验后构造。

        Raises:
            InvalidWxidError: 格式不合法或类型不是 Wxid / str
        """
        if isinstance(value, cls):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.value
