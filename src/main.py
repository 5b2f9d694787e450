# src/main.py
import sys
import traceback

# 모듈 경로 설정
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)) + "/..")

from src.config import Config
from src.core.models import GREETING
from src.utils.logger import EngineLogger


def print_hello() -> None:
    print(GREETING)


def main() -> None:
    # 1. 설정 및 로거 초기화
    config = Config()
    logger = EngineLogger(config.LOG_PATH, config.LOG_LEVEL, config.LOG_TO_FILE)

    logger.info("=== Starting Market Engine ===")
    try:
        print_hello()
    except Exception:
        logger.error(f"Critical Error:\n{traceback.format_exc()}")
        raise # 비정상 종료 코드를 위해 raise
    logger.info("=== Market Engine finished ===")


if __name__ == "__main__":
    main()
