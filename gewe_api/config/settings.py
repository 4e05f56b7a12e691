"""Gewe 网关配置管理"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class GeweSettings(BaseSettings):
    """Gewe 网关配置"""

    model_config = SettingsConfigDict(
        env_prefix="GEWE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 网关地址
    base_url: str = "https://www.geweapi.com/gewe/v2/api"

    # 鉴权配置（X-GEWE-TOKEN）
    token: str = ""

    # 登录设备的 appId
    app_id: str = ""

    # 请求超时（秒）
    timeout: float = 30.0

    @property
    def is_valid(self) -> bool:
        """验证配置是否完整"""
        return bool(self.base_url) and bool(self.token)


@lru_cache
def get_settings() -> GeweSettings:
    """获取配置单例"""
    return GeweSettings()
