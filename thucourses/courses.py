"""Course records and the helpers that clean, order and export them."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

logger = logging.getLogger(__name__)

UNKNOWN = "未知"

_TAG_RE = re.compile(r"<.*?>")
_LOCATION_RE = re.compile(r"\[.*?\]")
_NUMBER_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_GRADE_RE = re.compile(r"/[\t\n\f\r ]*資工系[\t\n\f\r ]*([A-Z0-9,]+)")
_CSV_WHITESPACE = frozenset(" \t\n\v\f\r\x85\xa0\u1680\u2000\u2001\u2002\u2003"
                            "\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
                            "\u2028\u2029\u202f\u205f\u3000")


@dataclass
class Course:
    """A single course offered by the department."""

    code: str = ""
    name: str = ""
    course_type: str = ""
    grade: str = ""
    instructor: str = ""
    notes: str = ""
    credits: str = ""
    hours: int = 0


def split_course_type_and_name(name: str) -> tuple[str, str]:
    """Split ``"type-name english"`` into ``(type, name)``.

    Without a ``-`` separator the type is unknown and the whole string is the name.
    """
    if "-" not in name:
        return UNKNOWN, name
    parts = name.split("-")
    return parts[0], parts[1].split(" ")[0]


def _atoi(text: str) -> int:
    """Parse a decimal integer, treating anything malformed as zero."""
    return int(text) if _INT_RE.fullmatch(text) else 0


def sort_courses_as_team(courses: list[Course]) -> list[Course]:
    """Group courses by name and order the groups by their smallest code.

    Within a group, courses are ordered by the numeric value of their code.
    A group's smallest code is chosen by text comparison, then groups are
    ordered by that code's numeric value.
    """
    if not courses:
        return courses

    groups: dict[str, list[Course]] = {}
    min_codes: dict[str, str] = {}
    for course in courses:
        members = groups.setdefault(course.name, [])
        members.append(course)
        current = min_codes.get(course.name)
        if current is None or course.code < current:
            min_codes[course.name] = course.code

    ordered_names = sorted(groups, key=lambda group: _atoi(min_codes[group]))
    return [
        course
        for group in ordered_names
        for course in sorted(groups[group], key=lambda c: _atoi(c.code))
    ]


def strip_tags(html: str) -> str:
    """Remove every HTML tag from ``html``."""
    return _TAG_RE.sub("", html)


def _needs_quotes(field: str) -> bool:
    if field == "":
        return False
    if field == "\\.":
        return True
    if any(ch in field for ch in ',"\r\n'):
        return True
    return field[0] in _CSV_WHITESPACE


def _format_field(field: str) -> str:
    if not _needs_quotes(field):
        return field
    return '"' + field.replace('"', '""') + '"'


def _format_record(fields: Iterable[str]) -> str:
    return ",".join(_format_field(field) for field in fields) + "\n"


def write_csv_file(
    file_name: str | Path, contents: Sequence[Course], header: Sequence[str]
) -> None:
    """Write ``contents`` under ``header`` to a UTF-8 CSV file with a BOM.

    Raises ValueError when the file name, contents or header is empty.
    """
    if not str(file_name):
        raise ValueError("檔名不可為空")
    if not contents:
        raise ValueError("內容不可為空")
    if not header:
        raise ValueError("標頭不可為空")

    try:
        handle = open(file_name, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise OSError(f"建立檔案 {file_name} 失敗: {exc}") from exc

    with handle:
        handle.write("\ufeff")
        handle.write(_format_record(header))
        for course in contents:
            handle.write(
                _format_record(
                    (
                        course.code,
                        course.course_type,
                        course.name,
                        course.grade,
                        course.credits,
                        str(course.hours),
                        course.instructor,
                        course.notes,
                    )
                )
            )

    print(f"成功將資料寫入 {file_name}！")


def calculate_hours(time_str: str) -> int:
    """Count the class periods listed in a time-and-location string."""
    if "無資料" in time_str:
        return 0
    cleaned = _LOCATION_RE.sub("", time_str)
    return len(_NUMBER_RE.findall(cleaned))


def parse_grade_from_notes(notes: str) -> str:
    """Extract the class/grade such as ``1A`` or ``2A,2B`` from course notes."""
    match = _GRADE_RE.search(notes)
    if match:
        return match.group(1).strip()
    logger.debug("other info: %s", notes)
    return UNKNOWN