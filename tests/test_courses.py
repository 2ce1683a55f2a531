import pytest

from thucourses.courses import (
    Course,
    calculate_hours,
    parse_grade_from_notes,
    sort_courses_as_team,
    split_course_type_and_name,
    strip_tags,
    write_csv_file,
)

HEADER = ["選課代碼", "課程類別", "課程名稱", "年級/班級", "學分數", "時數", "授課教師", "備註"]
CONTENT = [
    Course(
        code="1001",
        course_type="必修",
        name="測試課",
        grade="1",
        credits="3-0",
        hours=3,
        instructor="測試員",
        notes="無",
    )
]


@pytest.mark.parametrize(
    "text, expected_type, expected_name",
    [
        ("選修-這是中文課程 course name", "選修", "這是中文課程"),
        ("必修-資料結構", "必修", "資料結構"),
        ("專題討論", "未知", "專題討論"),
        ("", "未知", ""),
    ],
)
def test_split_course_type_and_name(text, expected_type, expected_name):
    assert split_course_type_and_name(text) == (expected_type, expected_name)


def test_sort_courses_as_team():
    unsorted = [
        Course(name="B", code="30"),
        Course(name="A", code="20"),
        Course(name="C", code="5"),
        Course(name="B", code="10"),
    ]
    expected = [
        Course(name="C", code="5"),
        Course(name="B", code="10"),
        Course(name="B", code="30"),
        Course(name="A", code="20"),
    ]
    assert sort_courses_as_team(unsorted) == expected


def test_sort_courses_as_team_empty():
    assert sort_courses_as_team([]) == []


def test_sort_group_minimum_is_chosen_textually():
    courses = [
        Course(name="X", code="5"),
        Course(name="X", code="10"),
        Course(name="Y", code="7"),
    ]
    result = sort_courses_as_team(courses)
    assert [(c.name, c.code) for c in result] == [("Y", "7"), ("X", "5"), ("X", "10")]


def test_sort_keeps_all_courses():
    courses = [Course(name=n, code=c) for n, c in [("A", "3"), ("B", "1"), ("A", "2"), ("C", "9")]]
    result = sort_courses_as_team(courses)
    assert sorted((c.name, c.code) for c in result) == sorted((c.name, c.code) for c in courses)


def test_write_csv_file_success(tmp_path, capsys):
    path = tmp_path / "test_success.csv"
    write_csv_file(path, CONTENT, HEADER)
    data = path.read_bytes()
    assert data.startswith(b"\xef\xbb\xbf")
    text = data.decode("utf-8")[1:]
    assert text == (
        "選課代碼,課程類別,課程名稱,年級/班級,學分數,時數,授課教師,備註\n"
        "1001,必修,測試課,1,3-0,3,測試員,無\n"
    )
    assert "成功將資料寫入" in capsys.readouterr().out


def test_write_csv_file_quotes_special_fields(tmp_path):
    path = tmp_path / "quoted.csv"
    course = Course(code="1", name="a,b", notes='line1\nsay "hi"', instructor=" x")
    write_csv_file(path, [course], ["h"])
    text = path.read_text(encoding="utf-8-sig")
    assert text == 'h\n1,,"a,b",,,0," x","line1\nsay ""hi"""\n'


def test_write_csv_file_empty_filename():
    with pytest.raises(ValueError):
        write_csv_file("", CONTENT, HEADER)


def test_write_csv_file_empty_content(tmp_path):
    path = tmp_path / "test_fail_empty_content.csv"
    with pytest.raises(ValueError):
        write_csv_file(path, [], HEADER)
    assert not path.exists()


def test_write_csv_file_empty_header(tmp_path):
    with pytest.raises(ValueError):
        write_csv_file(tmp_path / "x.csv", CONTENT, [])


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<p>Hello</p>", "Hello"),
        ("<div><span>World</span></div>", "World"),
        ("Just a string", "Just a string"),
        ("", ""),
        ('<a href="/path">Link</a>', "Link"),
    ],
)
def test_strip_tags(html, expected):
    assert strip_tags(html) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("星期二/6,7,8[C118]", 3),
        ("星期二/9,三/9[H307] 星期一/1,2[H308]", 4),
        ("一/1,2,3", 3),
        ("無資料", 0),
        ("", 0),
        ("[ST436]", 0),
    ],
)
def test_calculate_hours(text, expected):
    assert calculate_hours(text) == expected


@pytest.mark.parametrize(
    "notes, expected",
    [
        ("28019 資訊工程學系  / 資工系1A<BR>", "1A"),
        ("28240 資訊工程學系  / 資工系2A,2B<BR>2A、2B併班", "2A,2B"),
        ("68001 資訊工程學系  / 資工碩2-4<BR>", "未知"),
        ("這是一個沒有班級資訊的備註", "未知"),
    ],
)
def test_parse_grade_from_notes(notes, expected):
    assert parse_grade_from_notes(notes) == expected