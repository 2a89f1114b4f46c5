import os

# 창 테스트는 화면 없이 실행한다
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
