from csv_table import parse_csv, read_csv_frame


def test_trailing_blank_line_is_skipped():
    text = "Year,Percentage\n2019,10.1\n2020,10.5\n\n"
    records = parse_csv(text)
    assert len(records) == 2
    assert records[0] == {"Year": "2019", "Percentage": "10.1"}
    assert records[1] == {"Year": "2020", "Percentage": "10.5"}


def test_blank_lines_between_rows_are_skipped():
    text = "a,b\n1,2\n\n   \n3,4\n"
    assert parse_csv(text) == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]


def test_values_stay_raw_strings():
    text = "FIPS.Codes,percent.men.diabetes\n01001,10.50\n"
    assert parse_csv(text) == [{"FIPS.Codes": "01001", "percent.men.diabetes": "10.50"}]


def test_short_row_leaves_trailing_fields_unset():
    text = "a,b,c\n1,2,3\n4,5\n"
    records = parse_csv(text)
    assert len(records) == 2
    assert records[1] == {"a": "4", "b": "5"}
    assert "c" not in records[1]


def test_header_only_gives_no_records():
    assert parse_csv("a,b,c\n") == []


def test_empty_text_gives_empty_frame():
    assert read_csv_frame("").empty
    assert parse_csv("") == []


def test_missing_value_tokens_stay_raw_strings():
    text = "a,b,c,d\n1,NA,,N/A\nnull,2,3,4\n"
    assert parse_csv(text) == [
        {"a": "1", "b": "NA", "c": "", "d": "N/A"},
        {"a": "null", "b": "2", "c": "3", "d": "4"},
    ]


def test_quotes_are_not_special():
    text = 'a,b,c\n"x,y",z\n'
    assert parse_csv(text) == [{"a": '"x', "b": 'y"', "c": "z"}]


def test_extra_fields_are_ignored():
    text = "a,b\n1,2,3\n"
    assert parse_csv(text) == [{"a": "1", "b": "2"}]


def test_short_rows_only_leave_missing_column_unset():
    text = "a,b,c\n1,2\n3,4\n"
    records = parse_csv(text)
    assert records == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]
