# timestamps.py
import re
from datetime import datetime, timezone
from typing import NamedTuple, Optional, Tuple

# ============================================================
# 🔹 CONSTANTES
# ============================================================
INVALID_DATE = {'error': 'Invalid Date'}

SECONDS_PER_DAY = 86400
I64_MIN = -2 ** 63
I64_MAX = 2 ** 63 - 1

# Días entre 0000-03-01 y 1970-01-01 (calendario gregoriano proléptico)
EPOCH_SHIFT = 719468
DAYS_PER_ERA = 146097  # 400 años

WEEKDAYS = ('Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat')
MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

# Solo dígitos ASCII: int() aceptaría espacios, "_" y dígitos unicode
TIMESTAMP_RE = re.compile(r'[+-]?[0-9]+')
DATE_RE = re.compile(r'([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})')


class ParsedDate(NamedTuple):
    unix: int          # medianoche UTC
    datestring: str    # YYYY-MM-DD que se parseó


# ============================================================
# 🔹 CALENDARIO
# ============================================================
# datetime.date no admite el año 0, así que se trabaja con conteo de días.

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def days_from_civil(year: int, month: int, day: int) -> int:
    """Días desde 1970-01-01 hasta la fecha dada."""
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_ERA + doe - EPOCH_SHIFT


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Inverso de days_from_civil: (año, mes, día)."""
    days += EPOCH_SHIFT
    era = days // DAYS_PER_ERA
    doe = days - era * DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (month <= 2)
    return year, month, day


# ============================================================
# 🔹 PARSEO
# ============================================================
def parse_timestamp(value: str) -> Optional[int]:
    """Devuelve el entero si `value` es un timestamp Unix (i64), si no None."""
    if TIMESTAMP_RE.fullmatch(value) is None:
        return None
    seconds = int(value)
    if not I64_MIN <= seconds <= I64_MAX:
        return None
    return seconds


def timestamp_to_datestring(seconds: int) -> Optional[str]:
    """
    Convierte un timestamp a su fecha de calendario UTC (YYYY-MM-DD).
    Se descarta la hora del día. None si el año no cabe en cuatro dígitos.
    """
    year, month, day = civil_from_days(seconds // SECONDS_PER_DAY)
    if not 0 <= year <= 9999:
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_calendar_date(value: str) -> Optional[int]:
    """Parseo estricto de YYYY-MM-DD; devuelve días desde la época."""
    match = DATE_RE.fullmatch(value)
    if match is None:
        return None
    year, month, day = (int(g) for g in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
        return None
    return days_from_civil(year, month, day)


def parse_date(value: str) -> Optional[ParsedDate]:
    """
    Resuelve el parámetro de la ruta /api/<date> a medianoche UTC.

    Un entero se interpreta como timestamp Unix y se trunca al inicio de su
    día UTC. Devuelve None cuando el valor no es una fecha válida.
    """
    seconds = parse_timestamp(value)
    if seconds is not None:
        value = timestamp_to_datestring(seconds)
        if value is None:
            return None

    days = parse_calendar_date(value)
    if days is None:
        return None
    return ParsedDate(days * SECONDS_PER_DAY, value)


# ============================================================
# 🔹 RESULTADOS
# ============================================================
def format_rfc2822(unix: int) -> str:
    """RFC 2822 en UTC, p. ej. 'Sun, 25 Dec 2016 00:00:00 +0000'."""
    days, secs = divmod(unix, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hours, rest = divmod(secs, 3600)
    minutes, seconds = divmod(rest, 60)
    # 1970-01-01 fue jueves
    weekday = WEEKDAYS[(days + 4) % 7]
    return (f"{weekday}, {day:02d} {MONTHS[month - 1]} {year:04d} "
            f"{hours:02d}:{minutes:02d}:{seconds:02d} +0000")


def to_result(unix: int) -> dict:
    """Serializa un instante como {'unix': ..., 'utc': ...}."""
    return {
        'unix': unix,
        'utc': format_rfc2822(unix),
    }


def now_result() -> dict:
    return to_result(int(datetime.now(timezone.utc).timestamp()))
