import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()

class Config:
    def __init__(self):
        # 인스턴스 생성 시점에 환경변수 읽기
        # 1. 로그 설정
        self.LOG_PATH = os.getenv("MARKET_ENGINE_LOG_PATH", "logs")
        self.LOG_LEVEL = os.getenv("MARKET_ENGINE_LOG_LEVEL", "INFO").upper()

        # 문자열 "True"/"true"를 Python boolean True로 변환
        self.LOG_TO_FILE = os.getenv("MARKET_ENGINE_LOG_TO_FILE", "True").lower() == "true"
