import os
import sys
import tempfile
from pathlib import Path

# 테스트용 환경 변수 세팅 (core.config 임포트 전에 적용)
os.environ.setdefault("GONGMUN_LOG_DIR", tempfile.mkdtemp(prefix="gongmun-logs-"))

# sys.path에 저장소 루트 추가하여 gongmun / core / routers 검색 가능하게 함
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
