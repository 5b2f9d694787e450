# src/core/models.py

# 인사 문구 (줄바꿈 제외)
GREETING = "Hello, Market Engine!"

# print_hello가 stdout에 써야 하는 정확한 값
EXPECTED_GREETING = f"{GREETING}\n"
