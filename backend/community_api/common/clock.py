import time


# 등록/수정 시각은 epoch millis(int)로 저장
def now_millis() -> int:
    return int(time.time() * 1000)
