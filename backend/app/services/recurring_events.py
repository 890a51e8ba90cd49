"""매년 반복되는 기념일(데뷔일, 멤버 생일) 일정을 조회 구간마다 계산합니다.

계산된 일정은 저장되지 않으며 캐시하지 않습니다. 반복 주기는 고정 기준 연도
(데뷔 연도)를 시작점으로 하므로 기준 연도 이전 구간에는 발생하지 않습니다.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Iterator

ANCHOR_YEAR = 2023


@dataclass(frozen=True)
class RecurringRule:
    key: str
    title: str
    type: str  # B/C/E
    month: int
    day: int
    anchor_year: int = ANCHOR_YEAR

    def occurrences(self, range_start: date, range_end: date) -> Iterator[date]:
        first_year = max(range_start.year, self.anchor_year)
        for year in range(first_year, range_end.year + 1):
            try:
                current = date(year, self.month, self.day)
            except ValueError:
                # 2/29 규칙은 윤년에만 발생한다.
                continue
            if range_start <= current <= range_end:
                yield current


DEFAULT_RULES: tuple[RecurringRule, ...] = (
    RecurringRule(key="debut", title="Debut ♡", type="E", month=10, day=18),
    RecurringRule(key="birthday-chodan", title="CHODAN Birthday 🎂", type="B", month=11, day=1),
    RecurringRule(key="birthday-majenta", title="MAJENTA Birthday 🎂", type="B", month=6, day=2),
    RecurringRule(key="birthday-hina", title="HINA Birthday 🎂", type="B", month=1, day=30),
    RecurringRule(key="birthday-siyeon", title="SIYEON Birthday 🎂", type="B", month=5, day=16),
)


def synthetic_event_id(rule: RecurringRule, occurrence: date) -> str:
    return f"recurring-{rule.key}-{occurrence.strftime('%Y%m%d')}"


def expand_rules(
    range_start: date,
    range_end: date,
    rules: Iterable[RecurringRule] = DEFAULT_RULES,
) -> list[dict]:
    events: list[dict] = []
    for rule in rules:
        for occurrence in rule.occurrences(range_start, range_end):
            at = datetime.combine(occurrence, datetime.min.time())
            events.append({
                "id": synthetic_event_id(rule, occurrence),
                "start": at,
                "end": at,
                "type": rule.type,
                "title": rule.title,
                "allDay": True,
                "recurring": True,
            })
    return events
