"""Plain-text (Korean) rendering of a normalized itinerary.

The report is built from an ordered list of section builders, each returning
complete lines; separators are applied once at the end. Output depends only
on the `ItinerarySummary` passed in, so the same summary always yields the
same text.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from ..core.schemas import ItinerarySummary, Leg
from ..utils.units import meters_to_km_text, seconds_to_minutes

NOT_FOUND_TEXT = "경로를 찾을 수 없습니다."
FAILURE_PREFIX = "대중교통 경로 조회 실패: "

WALK_LABEL = "도보"
UNKNOWN_MODE_LABEL = "알 수 없음"
ARROW = " → "
DETAIL_HEADER = "[상세 경유지]"
SERVICE_ACTIVE_TEXT = "운행중"
SERVICE_ENDED_TEXT = "운행종료"

LINE_SEPARATOR = "\n"
BLOCK_SEPARATOR = "\n\n"
_INDENT = "    "

Section = Callable[[ItinerarySummary], List[str]]


def format_itinerary(summary: ItinerarySummary) -> str:
    """Render summary line, metrics and per-leg details."""
    overview = _render(summary, (_route_summary_lines, _metric_lines))
    details = _render(summary, (_detail_lines,))
    return BLOCK_SEPARATOR.join([overview, details])


def format_not_found() -> str:
    return NOT_FOUND_TEXT


def format_failure(message: str) -> str:
    """Single-line failure report; newlines inside `message` are collapsed."""
    return FAILURE_PREFIX + " ".join(str(message).split())


def _render(summary: ItinerarySummary, sections: Sequence[Section]) -> str:
    lines: List[str] = []
    for section in sections:
        lines.extend(section(summary))
    return LINE_SEPARATOR.join(lines)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _route_summary_lines(summary: ItinerarySummary) -> List[str]:
    return [f"경로 요약: {ARROW.join(_short_label(leg) for leg in summary.legs)}"]


def _metric_lines(summary: ItinerarySummary) -> List[str]:
    lines: List[str] = []
    if summary.total_time_seconds is not None:
        lines.append(f"소요 시간: 약 {seconds_to_minutes(summary.total_time_seconds)}분")
    lines.append(f"환승: {summary.transfer_count}회")
    if summary.fare_amount:
        lines.append(f"요금: {summary.fare_amount}원")
    if summary.total_distance_meters is not None:
        lines.append(f"총 거리: {meters_to_km_text(summary.total_distance_meters)}km")
    if summary.total_walk_distance_meters:
        lines.append(f"총 도보 거리: {summary.total_walk_distance_meters}m")
    if summary.total_walk_time_seconds is not None:
        lines.append(f"총 도보 시간: 약 {seconds_to_minutes(summary.total_walk_time_seconds)}분")
    return lines


def _detail_lines(summary: ItinerarySummary) -> List[str]:
    entries = [
        LINE_SEPARATOR.join(_leg_lines(idx, leg))
        for idx, leg in enumerate(summary.legs, start=1)
    ]
    return [DETAIL_HEADER, BLOCK_SEPARATOR.join(entries)]


# ---------------------------------------------------------------------------
# Legs
# ---------------------------------------------------------------------------


def _short_label(leg: Leg) -> str:
    if leg.is_walk:
        return WALK_LABEL
    return leg.route_label or leg.mode or UNKNOWN_MODE_LABEL


def _leg_minutes(leg: Leg) -> int:
    return seconds_to_minutes(leg.section_time_seconds or 0)


def _leg_lines(idx: int, leg: Leg) -> List[str]:
    if leg.is_walk:
        return _walk_leg_lines(idx, leg)
    return _transit_leg_lines(idx, leg)


def _walk_leg_lines(idx: int, leg: Leg) -> List[str]:
    lines = [f"[{idx}] {WALK_LABEL} ({leg.distance_meters}m, 약 {_leg_minutes(leg)}분)"]
    if leg.start_name:
        lines.append(f"{_INDENT}- 출발: {leg.start_name}")
    if leg.end_name:
        lines.append(f"{_INDENT}- 도착: {leg.end_name}")
    if leg.walk_steps:
        lines.extend(f"{_INDENT}· {step}" if step else f"{_INDENT}·" for step in leg.walk_steps)
    return lines


def _transit_leg_lines(idx: int, leg: Leg) -> List[str]:
    title = leg.mode or UNKNOWN_MODE_LABEL
    if leg.route_label:
        title += f"({leg.route_label})"
    lines = [f"[{idx}] {title} - {leg.distance_meters}m, 약 {_leg_minutes(leg)}분"]
    if leg.start_name:
        lines.append(f"{_INDENT}- 승차: {leg.start_name}")
    if leg.end_name:
        lines.append(f"{_INDENT}- 하차: {leg.end_name}")

    lane = leg.lane_info
    if lane is not None:
        if lane.route_label:
            lines.append(f"{_INDENT}- 노선: {lane.route_label}")
        if lane.route_type:
            lines.append(f"{_INDENT}- 노선타입: {lane.route_type}")
        if lane.service_active is not None:
            status = SERVICE_ACTIVE_TEXT if lane.service_active else SERVICE_ENDED_TEXT
            lines.append(f"{_INDENT}- 운행여부: {status}")

    if leg.passed_stations:
        lines.append(f"{_INDENT}- 경유지: {ARROW.join(leg.passed_stations)}")
    return lines
