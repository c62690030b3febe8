"""
AndLogView
로그 레코드 뷰어 - 우선순위/태그/PID/검색어 필터링
"""

__version__ = "0.1.0"
