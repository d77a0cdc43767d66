"""
Codec configuration loader and helpers.

- Values come from the environment over built-in defaults, validated by CodecSettings.
- JWT_ALGORITHM: default signing algorithm (HS256 / HS384 / HS512), default HS256
- JWT_JSON_ENSURE_ASCII: escape non-ASCII characters in token JSON, default true
- JWT_LOG_LEVEL: level used by the command-line tool, default WARNING
- JWT_SECRET: only read through get_jwt_secret(); never stored in the settings snapshot
- On an invalid value: log WARNING and keep the default for that field.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .algorithms import Algorithm

logger = logging.getLogger(__name__)

_ENV_JWT_SECRET = "JWT_SECRET"
_ENV_MAP = {
    "default_algorithm": "JWT_ALGORITHM",
    "json_ensure_ascii": "JWT_JSON_ENSURE_ASCII",
    "log_level": "JWT_LOG_LEVEL",
}


class CodecSettings(BaseModel):
    default_algorithm: Algorithm = Field(Algorithm.HS256, description="默認簽名算法")
    json_ensure_ascii: bool = Field(True, description="JSON 中轉義非 ASCII 字符")
    log_level: str = Field("WARNING", description="命令行工具日誌級別")

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def _check_algorithm(cls, v: Any) -> Algorithm:
        return Algorithm.from_name(v.strip() if isinstance(v, str) else v)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level


_SETTINGS = CodecSettings()


def _load_from_env() -> CodecSettings:
    """讀取環境變量並逐項校驗；無效的項記錄警告並使用默認值。"""
    values: Dict[str, Any] = {}
    for field_name, env_name in _ENV_MAP.items():
        raw = os.environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            CodecSettings(**{field_name: raw})
        except (ValidationError, ValueError) as e:
            default = CodecSettings.model_fields[field_name].default
            logger.warning("Invalid %s=%r in environment; using default %r (%s)", env_name, raw, default, e)
            continue
        values[field_name] = raw
    return CodecSettings(**values)


def _init_config() -> None:
    global _SETTINGS
    _SETTINGS = _load_from_env()
    logger.debug(
        "Codec config loaded. default_algorithm=%s, json_ensure_ascii=%s",
        _SETTINGS.default_algorithm.value,
        _SETTINGS.json_ensure_ascii,
    )


def reload() -> CodecSettings:
    """重新從環境變量加載配置（測試或運行時修改環境後使用）。"""
    _init_config()
    return _SETTINGS


def get_settings() -> CodecSettings:
    return _SETTINGS


def get_default_algorithm() -> Algorithm:
    return _SETTINGS.default_algorithm


def get_json_ensure_ascii() -> bool:
    return _SETTINGS.json_ensure_ascii


def get_jwt_secret() -> Optional[str]:
    """獲取 JWT 密鑰：僅來自 ENV JWT_SECRET，未設置時返回 None。"""
    return os.environ.get(_ENV_JWT_SECRET) or None


def get_effective_config_snapshot() -> Dict[str, Any]:
    """
    返回有效配置的快照 (用於診斷或測試)，不包含密鑰本身。
    """
    snapshot = _SETTINGS.model_dump(mode="json")
    snapshot["jwt_secret_from_env"] = bool(os.environ.get(_ENV_JWT_SECRET))
    return snapshot


# 在模塊加載時自動初始化配置
_init_config()
