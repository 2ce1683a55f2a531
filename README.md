# thucourses

Collects the course listings of the Computer Science department (dept. 350)
from the Tunghai University course site and writes each term's required
undergraduate courses to a CSV file.

For every course row on a department page the crawler reads:

- the course code (選課代碼), with inner whitespace collapsed
- the course type and Chinese name, taken from the `type-name` title
- the credits (學分數)
- the teaching hours, counted from the periods in the time/location cell
  (bracketed room numbers are ignored, and `無資料` gives 0)
- the instructors. When there are several they are joined with 與, and 教授
  is added after the names.
- the class/grade, parsed from the notes (for example `資工系1A` gives `1A`,
  otherwise `未知`)
- the notes, with `<br/>` turned into line breaks and HTML tags stripped

Master's courses (notes containing 碩) and elective courses (type containing
選修) are left out. A course row that lists no instructor raises
`ValueError`.

Before writing, the courses are grouped by name. Groups are ordered by the
smallest course code in each group, and courses within a group are ordered by
the numeric value of their code.

## Installation

```
pip install .
```

## Usage

```
thucourses
```

By default the command crawls both terms of every academic year from 108 to
113. For each term it writes a file named like `108學年上課程紀錄.csv` or
`108學年下課程紀錄.csv`. The files are UTF-8 with a byte-order mark, so
spreadsheet programs open them correctly.

Options:

- `--first-year N` first academic year to crawl (default 108)
- `--last-year N` last academic year to crawl (default 113)
- `--output-dir DIR` directory the CSV files are written to (default: the
  current directory)

If a page cannot be fetched, the command logs the error and exits with status
1. A term with no matching courses writes no file; a warning is logged and the
crawl goes on.

The header row has seven columns (選課代碼, 課程類別, 課程名稱, 學分數, 時數,
授課教師, 備註), while each data row has eight: code, type, name, grade,
credits, hours, instructor and notes.

## Library use

The parsing and output helpers live in `thucourses.courses`:

```python
from thucourses.courses import (
    Course,
    calculate_hours,
    parse_grade_from_notes,
    sort_courses_as_team,
    split_course_type_and_name,
    strip_tags,
    write_csv_file,
)

split_course_type_and_name("必修-資料結構")        # ("必修", "資料結構")
split_course_type_and_name("專題討論")             # ("未知", "專題討論")
calculate_hours("星期二/6,7,8[C118]")              # 3
parse_grade_from_notes("28019 資訊工程學系  / 資工系1A<BR>")  # "1A"
strip_tags("<p>Hello</p>")                         # "Hello"
```

`Course` is a dataclass with the fields `code`, `name`, `course_type`,
`grade`, `instructor`, `notes`, `credits` and `hours`.

`write_csv_file(file_name, contents, header)` raises `ValueError` when the
file name, the course list or the header is empty, and `OSError` when the
file cannot be created.

`thucourses.crawler` provides the following:

- `term_url(year, term)` builds the page address for a term.
- `output_file_name(year, term)` gives the CSV file name for a term.
- `parse_course_row(row)` turns one table row into a `Course`, or `None` for
  rows that are skipped.
- `parse_courses(html)` extracts the course list from a page.
- `crawl_term(year, term, session=None)` fetches and parses one term with
  `requests`, re-raising `requests.RequestException` on failure. It does not
  sort the result.
- `main(argv=None)` runs the command described above.

## Tests

```
pip install .[test]
pytest
```