# orders_api/core/validation.py
"""
Валидация и разбор параметров пути.

Формат даты — упрощённый ISO 8601, независимый от локали:
    YYYY | YYYY-MM | YYYY-MM-DD[THH:mm[:ss[.sss]][Z|±HH:mm]]
Дата без времени и время без смещения считаются UTC.
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timedelta, timezone
from typing import Optional


_INT_PREFIX_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

_DATE_TIME_RE = re.compile(
    r"(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,3}))?)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?"
    r")?)?)?",
    re.ASCII,
)


def parse_int(value: str) -> Optional[int]:
    """
    Разбирает целое число по правилам parseInt с основанием 10.

    Пробелы в начале и в конце игнорируются, после цифр может идти что угодно
    ("12abc" -> 12). Если цифр в начале нет или их слишком много
    для преобразования, возвращает None.
    """
    match = _INT_PREFIX_RE.match(value.strip())
    if match is None:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Строка длиннее лимита sys.get_int_max_str_digits()
        return None


def _parse_offset(raw: Optional[str]) -> timezone:
    if raw is None or raw == "Z":
        return timezone.utc

    sign = -1 if raw[0] == "-" else 1
    hours, minutes = int(raw[1:3]), int(raw[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError(f"Offset out of range: {raw}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_date_time_string(value: str) -> datetime:
    """
    Преобразует строку даты в datetime с часовым поясом UTC.

    Raises:
        ValueError: строка не соответствует формату или поля вне диапазона
    """
    match = _DATE_TIME_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"Invalid date-time string: {value!r}")

    parts = match.groupdict()
    year = int(parts["year"])
    month = int(parts["month"] or 1)
    day = int(parts["day"] or 1)
    hour = int(parts["hour"] or 0)
    minute = int(parts["minute"] or 0)
    second = int(parts["second"] or 0)
    millis = int((parts["fraction"] or "0").ljust(3, "0"))

    if year < 1:
        raise ValueError(f"Year out of range: {value!r}")
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {value!r}")
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        raise ValueError(f"Day out of range: {value!r}")
    if minute > 59 or second > 59:
        raise ValueError(f"Time out of range: {value!r}")

    # 24:00:00.000 — конец суток, равен 00:00 следующего дня
    end_of_day = hour == 24
    if end_of_day:
        if minute or second or millis:
            raise ValueError(f"Time out of range: {value!r}")
        hour = 0
    elif hour > 23:
        raise ValueError(f"Time out of range: {value!r}")

    tz = _parse_offset(parts["offset"])

    try:
        result = datetime(year, month, day, hour, minute, second, millis * 1000, tzinfo=tz)
        if end_of_day:
            result += timedelta(days=1)
        return result.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Date out of range: {value!r}") from e


def is_valid_date_time_string(value: str) -> bool:
    """Проверяет, что строка — корректная дата в поддерживаемом формате."""
    try:
        parse_date_time_string(value)
    except ValueError:
        return False
    return True
