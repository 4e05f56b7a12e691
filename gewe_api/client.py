"""Gewe 网关 API 客户端"""
from typing import Any, Optional

import httpx
from loguru import logger

from .config import GeweSettings, get_settings
from .exceptions import GeweDecodeError, GeweHTTPStatusError, GeweTransportError


class GeweClient:
    """
    Gewe 网关 HTTP 客户端

    负责：
    - 拼接网关地址与路由
    - 附加鉴权请求头
    - 发送 JSON POST 请求并解析 JSON 响应

    响应中的 ret 等业务状态码原样返回，由调用方自行判断。
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化客户端

        Args:
            base_url: 网关地址，如 https://www.geweapi.com/gewe/v2/api
            token: 网关 Token，以 X-GEWE-TOKEN 请求头发送
            timeout: 单次请求超时（秒）
            transport: 自定义传输层（测试时注入 httpx.MockTransport）
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            headers={
                "X-GEWE-TOKEN": token,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Optional[GeweSettings] = None, **kwargs) -> "GeweClient":
        """根据配置创建客户端"""
        settings = settings or get_settings()
        return cls(
            base_url=settings.base_url,
            token=settings.token,
            timeout=settings.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> "GeweClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """关闭 HTTP 客户端"""
        await self._client.aclose()

    def url_for(self, route: str) -> str:
        """拼接完整请求地址"""
        return f"{self.base_url}/{route.lstrip('/')}"

    async def post_json(self, route: str, params: Optional[dict] = None) -> Any:
        """
        向网关发送一次 POST 请求

        Args:
            route: 路由，如 /contacts/fetchContactsList
            params: 请求体，为 None 时不发送请求体

        Returns:
            解析后的 JSON 响应（不检查其中的业务状态码）

        Raises:
            GeweTransportError: 网络错误或非 2xx 状态码
            GeweDecodeError: 响应体不是合法的 JSON
        """
        logger.debug(f"[Gewe] POST {route}")

        try:
            response = await self._client.post(self.url_for(route), json=params)
        except httpx.TransportError as e:
            logger.error(f"[Gewe] 请求 {route} 失败：{e!r}")
            raise GeweTransportError(route, str(e) or type(e).__name__, e) from e

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"[Gewe] 请求 {route} 返回状态码 {response.status_code}")
            raise GeweHTTPStatusError(route, response.status_code, response.text, e) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"[Gewe] 解析 {route} 响应失败：{e}")
            raise GeweDecodeError(route, response.text, e) from e
