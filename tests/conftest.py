# tests/conftest.py
import logging
import pytest


class CapturedStdout:
    """capsys 위에 begin/end 구간을 두는 캡처 하네스"""

    def __init__(self, capsys):
        self._capsys = capsys

    def begin_capture(self) -> None:
        # 이전에 쌓인 출력은 버림
        self._capsys.readouterr()

    def end_capture(self) -> str:
        return self._capsys.readouterr().out


@pytest.fixture
def stdout_capture(capsys):
    return CapturedStdout(capsys)

@pytest.fixture
def reset_logger():
    """
    각 테스트 실행 전후로 로거 상태를 초기화하는 픽스처.
    logging 모듈은 싱글톤이라 상태가 유지되므로 필수적임.
    """
    logger = logging.getLogger("MarketEngine")
    for h in logger.handlers:
        h.close()
    logger.handlers = []

    yield

    for h in logger.handlers:
        h.close()
    logger.handlers = []
