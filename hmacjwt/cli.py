"""
命令行工具：簽發與檢查 JWT

    hmacjwt encode '{"sub": "demo"}' --key s3cret --alg HS384
    hmacjwt decode <token> --verify --key s3cret

密鑰優先級：--key > ENV JWT_SECRET
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import config
from .algorithms import SUPPORTED_ALGORITHMS
from .errors import JWTError
from .json_codec import json_decode
from .jwt import decode, encode
from .logging_config import setup_colorful_logging

EXIT_OK = 0
EXIT_TOKEN_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hmacjwt", description="Encode and decode HMAC-signed JWTs")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="日誌級別 (默認取 JWT_LOG_LEVEL)",
    )
    parser.add_argument("--plain", action="store_true", help="不使用 rich 輸出日誌")
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encode", help="簽發 token")
    p_enc.add_argument("payload", help="JSON payload，'-' 表示從 stdin 讀取")
    p_enc.add_argument("--key", default=None, help="簽名密鑰")
    p_enc.add_argument("--alg", default=None, choices=SUPPORTED_ALGORITHMS, help="簽名算法 (默認取 JWT_ALGORITHM)")

    p_dec = sub.add_parser("decode", help="解析 token")
    p_dec.add_argument("token", help="JWT，'-' 表示從 stdin 讀取")
    p_dec.add_argument("--verify", action="store_true", help="校驗簽名")
    p_dec.add_argument("--key", default=None, help="校驗密鑰")
    return parser


def _read_arg(value: str) -> str:
    if value == "-":
        return sys.stdin.read().strip()
    return value


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = (args.log_level or config.get_settings().log_level).upper()
    # 每次運行重新綁定處理器（級別與輸出流以本次參數為準）
    root_logger = logging.getLogger("hmacjwt")
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    logger = setup_colorful_logging(level=level, name="hmacjwt", rich_output=not args.plain)

    key = args.key or config.get_jwt_secret()

    try:
        if args.command == "encode":
            if not key:
                print("error: a key is required (--key or JWT_SECRET)", file=sys.stderr)
                return EXIT_USAGE
            payload = json_decode(_read_arg(args.payload))
            token = encode(payload, key, args.alg)
            logger.info("Issued %s token", args.alg or config.get_default_algorithm().value)
            print(token)
        else:
            if args.verify and not key:
                print("error: --verify requires a key (--key or JWT_SECRET)", file=sys.stderr)
                return EXIT_USAGE
            result = decode(_read_arg(args.token), verify=args.verify, key=key)
            if not args.verify:
                logger.warning("Signature NOT verified")
            print(json.dumps(result, indent=2, ensure_ascii=False))
    except JWTError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e.code}: {e}", file=sys.stderr)
        return EXIT_TOKEN_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
