"""
로그 필터 엔진

레코드 목록과 FilterSpec을 받아 모든 조건을 만족하는 레코드만
원래 순서대로 돌려주는 순수 함수 모음.
- 입력 목록을 수정하지 않음
- 호출 간 상태 없음 (어느 스레드에서 호출해도 됨)
"""
import logging
from collections.abc import Sequence as SequenceABC
from functools import lru_cache
from typing import List, Sequence

from .filter_spec import FilterSpec
from .record import LogRecord

logger = logging.getLogger(__name__)


def _check_spec(spec: FilterSpec) -> None:
    # None 스펙을 "결과 없음"으로 숨기지 않고 즉시 실패
    if not isinstance(spec, FilterSpec):
        raise TypeError(f"spec must be a FilterSpec, got {type(spec).__name__}")


def _check_records(records: Sequence[LogRecord]) -> None:
    # 인덱스 접근과 len()이 필요하므로 제너레이터 등은 거부
    if not isinstance(records, SequenceABC):
        raise TypeError(f"records must be a sequence of LogRecord, got {type(records).__name__}")


def _fold_char(ch: str) -> str:
    upper = ch.upper()
    if len(upper) == 1:
        ch = upper
    # 'İ'.lower()처럼 두 글자로 늘어나는 경우 첫 글자만 사용
    return ch.lower()[0]


@lru_cache(maxsize=65536)
def fold_case(text: str) -> str:
    """
    대소문자 무시 비교용 문자 단위 변환

    str.lower()/casefold()와 달리 길이가 변하지 않고 문맥(어말 ς 등)에
    영향받지 않으므로, 원문에 그대로 있는 부분 문자열은 항상 매칭된다.
    """
    return "".join(_fold_char(ch) for ch in text)


def _contains_ignore_case(haystack: str, needle_folded: str) -> bool:
    return needle_folded in fold_case(haystack)


def matches(record: LogRecord, spec: FilterSpec) -> bool:
    """단일 레코드가 스펙의 모든 조건을 만족하는지"""
    _check_spec(spec)
    return _match(record, spec, fold_case(spec.tag), fold_case(spec.message), fold_case(spec.search))


def _match(record: LogRecord, spec: FilterSpec, tag_folded: str, message_folded: str, search_folded: str) -> bool:
    # Priority
    if record.priority not in spec.selected_priorities:
        return False

    # Tag
    if tag_folded and not _contains_ignore_case(record.tag, tag_folded):
        return False

    # PID (숫자 비교가 아닌 10진 문자열 부분 일치)
    if spec.pid and spec.pid not in str(record.pid):
        return False

    # Message
    if message_folded and not _contains_ignore_case(record.message, message_folded):
        return False

    # Search (태그 또는 메시지)
    if search_folded:
        if not (_contains_ignore_case(record.tag, search_folded)
                or _contains_ignore_case(record.message, search_folded)):
            return False

    return True


def compute_filtered_indices(records: Sequence[LogRecord], spec: FilterSpec) -> List[int]:
    """
    필터를 통과한 레코드의 인덱스 목록 반환 (오름차순)

    테이블 모델은 레코드 복사본 대신 이 인덱스를 보관한다.

    Args:
        records: 전체 로그 레코드 (순서 유지)
        spec: 적용할 필터 스펙

    Returns:
        통과한 레코드의 원본 인덱스 리스트

    Raises:
        TypeError: spec이 FilterSpec이 아니거나 records가 시퀀스가 아닌 경우
    """
    _check_spec(spec)
    _check_records(records)

    total = len(records)
    if not total:
        return []

    # 스펙 문자열은 호출당 한 번만 변환
    tag_folded = fold_case(spec.tag)
    message_folded = fold_case(spec.message)
    search_folded = fold_case(spec.search)

    indices = [
        i for i, record in enumerate(records)
        if _match(record, spec, tag_folded, message_folded, search_folded)
    ]
    logger.debug(f"[Filter] {len(indices)}/{total}개 레코드 통과")
    return indices


def filter_records(records: Sequence[LogRecord], spec: FilterSpec) -> List[LogRecord]:
    """
    레코드 목록에 필터 스펙 적용 (안정 필터)

    중복 레코드도 각각 평가하여 유지하며, 원래 상대 순서를 보존한다.

    Args:
        records: 전체 로그 레코드
        spec: 적용할 필터 스펙

    Returns:
        조건을 모두 만족하는 레코드의 새 리스트
    """
    return [records[i] for i in compute_filtered_indices(records, spec)]
