"""Gewe 客户端异常定义"""
from typing import Optional


class GeweError(Exception):
    """Gewe 客户端错误基类"""


class InvalidWxidError(GeweError, ValueError):
    """wxid 格式不合法（在发起任何请求之前抛出）"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"无效的 wxid：{value!r}")


class GeweTransportError(GeweError):
    """网络层错误：连接失败、超时、TLS 握手失败等"""

    def __init__(self, route: str, message: str, cause: Optional[BaseException] = None):
        """
        初始化异常

        Args:
            route: 请求的路由
            message: 错误信息
            cause: 底层异常
        """
        self.route = route
        self.cause = cause
        super().__init__(f"[{route}] {message}")


class GeweHTTPStatusError(GeweTransportError):
    """网关返回了非 2xx 的 HTTP 状态码"""

    def __init__(self, route: str, status_code: int, body: str, cause: Optional[BaseException] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(route, f"HTTP {status_code}", cause)


class GeweDecodeError(GeweError):
    """响应体不是合法的 JSON"""

    def __init__(self, route: str, body: str, cause: Optional[BaseException] = None):
        self.route = route
        self.body = body
        self.cause = cause
        super().__init__(f"[{route}] 响应不是合法的 JSON：{body[:200]!r}")
