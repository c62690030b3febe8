"""
UI 모듈
PyQt6 기반 프레젠테이션 레이어 (필터 엔진 호출 및 결과 표시)
"""
