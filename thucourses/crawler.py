"""Scrape the department's course listings and export them term by term."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import requests
from bs4 import BeautifulSoup, Tag

from thucourses.courses import (
    Course,
    calculate_hours,
    parse_grade_from_notes,
    sort_courses_as_team,
    split_course_type_and_name,
    strip_tags,
    write_csv_file,
)

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
HEADER = ["選課代碼", "課程類別", "課程名稱", "學分數", "時數", "授課教師", "備註"]
FIRST_YEAR = 108
LAST_YEAR = 113
TERMS = (1, 2)

_ROW_SELECTOR = "table#no-more-tables > tbody > tr, table#no-more-tables > tr"
_TERM_NAMES = {"1": "上", "2": "下"}


def term_url(year: int | str, term: int | str) -> str:
    """Return the listing URL for one academic year and term."""
    return f"https://course.thu.edu.tw/view-dept/{year}/{term}/350/"


def output_file_name(year: int | str, term: int | str) -> str:
    """Return the CSV file name used for one academic year and term."""
    term_text = str(term)
    term_name = _TERM_NAMES.get(term_text, term_text)
    return f"{year}學年{term_name}課程紀錄.csv"


def _cell_text(row: Tag, selector: str) -> str:
    return "".join(cell.get_text() for cell in row.select(selector))


def _inner_html(row: Tag, selector: str) -> str:
    element = row.select_one(selector)
    if element is None:
        return ""
    return "".join(str(child) for child in element.contents)


def parse_course_row(row: Tag) -> Course | None:
    """Build a course from one table row.

    Returns None for rows without a course code, for graduate courses and for
    electives. Raises ValueError when a course row names no instructor.
    """
    code_text = _cell_text(row, "td[data-title='選課代碼']")
    if code_text == "":
        return None

    course = Course()
    course.code = " ".join(code_text.split())
    logger.debug("course.code = %s", course.code)

    name_html = _inner_html(row, "td[data-title='課程名稱'] > a")
    name_html = name_html.replace("<br/>", " ").strip()
    course.course_type, course.name = split_course_type_and_name(name_html)

    course.credits = _cell_text(row, "td[data-title='學分數']").strip()

    instructors = [
        link.get_text().strip() for link in row.select("td[data-title='授課教師'] a")
    ]
    if not instructors:
        raise ValueError(f"course {course.code} lists no instructor")
    if len(instructors) > 1 and instructors[1] != "":
        course.instructor = "與".join(instructors)
    else:
        course.instructor = instructors[0]
    course.instructor += "教授"
    logger.debug("instructor = %s", course.instructor)

    notes_html = _inner_html(row, "td[data-title='備註']")
    course.grade = parse_grade_from_notes(notes_html)
    course.notes = strip_tags(notes_html.replace("<br/>", "\n")).strip()

    time_location = _cell_text(row, "td[data-title='時間地點']")

    if "碩" in course.notes:
        return None
    course.hours = calculate_hours(time_location)
    if "選修" in course.course_type:
        return None
    return course


def parse_courses(html: str | bytes) -> list[Course]:
    """Return the required undergraduate courses listed in a department page."""
    soup = BeautifulSoup(html, "html.parser")
    courses = []
    for row in soup.select(_ROW_SELECTOR):
        course = parse_course_row(row)
        if course is not None:
            courses.append(course)
    return courses


def crawl_term(
    year: int | str, term: int | str, session: requests.Session | None = None
) -> list[Course]:
    """Download and parse the listing of one term.

    Raises requests.RequestException when the page cannot be fetched.
    """
    url = term_url(year, term)
    print(f"\n正在爬取目標網址: {url}\n")
    client = session if session is not None else requests.Session()
    try:
        response = client.get(url, headers={"User-Agent": USER_AGENT}, timeout=30)
        response.raise_for_status()
    except requests.RequestException as exc:
        status = getattr(getattr(exc, "response", None), "status_code", 0)
        logger.error("爬取網站時發生錯誤 (狀態碼: %s): %s", status, exc)
        logger.error("請檢查學年學期是否正確，或網路連線是否正常。")
        raise
    courses = parse_courses(response.content)
    print(f"\n爬取完成！共找到 {len(courses)} 門課程。")
    return courses


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export required department courses to CSV files."
    )
    parser.add_argument("--first-year", type=int, default=FIRST_YEAR)
    parser.add_argument("--last-year", type=int, default=LAST_YEAR)
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Crawl every term in the year range and write one CSV file per term."""
    args = _parse_args(argv)
    with requests.Session() as session:
        for year in range(args.first_year, args.last_year + 1):
            for term in TERMS:
                try:
                    courses = crawl_term(year, term, session)
                except requests.RequestException as exc:
                    logger.error("無法訪問目標網址: %s", exc)
                    return 1
                print("\n現正進行排序...")
                courses = sort_courses_as_team(courses)
                print("排序完成！")
                target = args.output_dir / output_file_name(year, term)
                try:
                    write_csv_file(target, courses, HEADER)
                except (ValueError, OSError) as exc:
                    logger.warning("%s: %s", target, exc)
    return 0