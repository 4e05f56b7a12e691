"""配置模块"""
from .settings import GeweSettings, get_settings

__all__ = ["GeweSettings", "get_settings"]
