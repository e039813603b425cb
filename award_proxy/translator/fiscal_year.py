"""US federal fiscal year windows.

FY N runs from Oct 1 of calendar year N-1 through Sep 30 of calendar year N,
so FY2023 is 2022-10-01 .. 2023-09-30.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..models import TimePeriod

FY_START_MONTH_DAY = "10-01"
FY_END_MONTH_DAY = "09-30"

# Widest range a single search may cover, in fiscal years.
MAX_FISCAL_YEAR_SPAN = 50


class FiscalYearRangeError(ValueError):
    """Raised when a requested fiscal year range is wider than MAX_FISCAL_YEAR_SPAN."""


def resolve_fiscal_years(
    fy: Optional[int] = None,
    fy_start: Optional[int] = None,
    fy_end: Optional[int] = None,
    reference_date: Optional[date] = None,
) -> tuple[int, int]:
    """Resolve the inclusive (start, end) fiscal year range for a search.

    Explicit range bounds win over the single ``fy``. With nothing supplied the
    range collapses to the current calendar year. No ordering check is made:
    a start after the end is returned as-is and yields no windows.
    """
    if reference_date is None:
        reference_date = date.today()

    start_fy = fy_start if fy_start is not None else fy
    if start_fy is None:
        start_fy = reference_date.year

    end_fy = fy_end if fy_end is not None else fy
    if end_fy is None:
        end_fy = start_fy

    return start_fy, end_fy


def fiscal_year_window(year: int) -> TimePeriod:
    return TimePeriod(
        start_date=f"{year - 1}-{FY_START_MONTH_DAY}",
        end_date=f"{year}-{FY_END_MONTH_DAY}",
    )


def fiscal_year_windows(start_fy: int, end_fy: int) -> list[TimePeriod]:
    """One window per fiscal year in [start_fy, end_fy]; empty when start_fy > end_fy.

    Raises FiscalYearRangeError when the range covers more than MAX_FISCAL_YEAR_SPAN years.
    """
    span = end_fy - start_fy + 1
    if span > MAX_FISCAL_YEAR_SPAN:
        raise FiscalYearRangeError(
            f"FY{start_fy}-FY{end_fy} covers {span} fiscal years; "
            f"at most {MAX_FISCAL_YEAR_SPAN} are allowed"
        )
    return [fiscal_year_window(year) for year in range(start_fy, end_fy + 1)]
