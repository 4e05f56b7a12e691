"""
Gewe API - 入口文件

检查 Gewe 网关配置与连通性
"""
import asyncio
import sys
from typing import Optional

import httpx
from loguru import logger

from gewe_api import GeweClient, GeweError
from gewe_api.api import fetch_contacts_list_cache
from gewe_api.config import GeweSettings, get_settings


# 配置日志
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level="INFO",
)


async def main(settings: Optional[GeweSettings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
    """主函数"""
    settings = settings or get_settings()

    # 验证配置
    if not settings.is_valid:
        logger.error("配置不完整，请检查 .env 文件（GEWE_BASE_URL / GEWE_TOKEN）")
        sys.exit(1)

    if not settings.app_id:
        logger.error("未配置 GEWE_APP_ID，无法测试网关连接")
        sys.exit(1)

    logger.info("配置验证通过 ✓")
    logger.info(f"网关地址：{settings.base_url}")

    # 测试网关连接
    logger.info("测试 Gewe 网关连接...")
    async with GeweClient.from_settings(settings, transport=transport) as client:
        try:
            value = await fetch_contacts_list_cache(client, settings.app_id)
        except GeweError as e:
            logger.error(f"Gewe 网关连接失败：{e}")
            sys.exit(1)

    ret = value.get("ret") if isinstance(value, dict) else None
    if ret == 200:
        logger.info("Gewe 网关连接成功 ✓")
    else:
        logger.warning(f"Gewe 网关返回 ret={ret}，msg={value.get('msg') if isinstance(value, dict) else value}")


if __name__ == "__main__":
    asyncio.run(main())
