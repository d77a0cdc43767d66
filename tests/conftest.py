import os
import sys

import pytest

# 确保项目根目录在 sys.path 中
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from hmacjwt import config as codec_config  # noqa: E402
from hmacjwt import jwt as jwt_lib  # noqa: E402

_ENV_VARS = ("JWT_SECRET", "JWT_ALGORITHM", "JWT_JSON_ENSURE_ASCII", "JWT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    每个测试在干净的环境变量下运行，并在结束后恢复配置快照
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    codec_config.reload()
    yield monkeypatch
    monkeypatch.undo()
    codec_config.reload()


@pytest.fixture
def secret():
    return "test-secret"


@pytest.fixture
def payload():
    return {"sub": "demo", "login_mode": "password", "roles": ["user"], "n": 42}


@pytest.fixture
def make_token(secret, payload):
    """
    签发 token 的工厂方法
    使用方式:
        make_token(alg="HS384", claims={"sub": "x"})
    """
    def _mk(alg: str = "HS256", claims=None, key=None):
        return jwt_lib.encode(payload if claims is None else claims, key or secret, alg)
    return _mk
