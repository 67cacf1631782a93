"""Tests for the quoted CSV tokenizer and reader."""

from input_readers.csv_text import decode_csv_bytes, read_csv_text, tokenize_line


def test_quoted_comma_stays_in_field():
    assert tokenize_line('a,"b,c",d') == ["a", "b,c", "d"]


def test_escaped_quotes():
    assert tokenize_line('"she said ""hi""",x') == ['she said "hi"', "x"]
    assert tokenize_line('"x""y",z') == ['x"y', "z"]


def test_fields_are_trimmed_and_empty_fields_kept():
    assert tokenize_line(" a , b ,,") == ["a", "b", "", ""]


def test_single_field_and_empty_line():
    assert tokenize_line("only") == ["only"]
    assert tokenize_line("") == [""]


def test_thousands_separator_inside_quotes():
    assert tokenize_line('CMC-1,L01,"18,000",5') == ["CMC-1", "L01", "18,000", "5"]


def test_read_csv_text_handles_crlf_and_blank_lines():
    text = 'Item,Lot,Qty,Box\r\nA,L1,"1,000",3\r\n\r\nB,L2,-,20\r\n'
    rows = read_csv_text(text)
    assert rows == [
        {"Item": "A", "Lot": "L1", "Qty": "1,000", "Box": "3"},
        {"Item": "B", "Lot": "L2", "Qty": "-", "Box": "20"},
    ]


def test_read_csv_text_pads_short_rows():
    rows = read_csv_text("Item,Lot,Qty,Box\nA,L1\n")
    assert rows == [{"Item": "A", "Lot": "L1", "Qty": "", "Box": ""}]


def test_read_csv_text_empty_input():
    assert read_csv_text("") == []


def test_decode_csv_bytes_strips_bom_and_reads_thai():
    content = "\ufeffItem,Lot\nตัวเก็บประจุ,L1\n".encode("utf-8")
    text = decode_csv_bytes(content)
    assert text.startswith("Item")
    assert "ตัวเก็บประจุ" in text


def test_decode_csv_bytes_falls_back_from_utf8():
    content = "Item,Lot\nขด,L1\n".encode("cp874")
    assert "ขด" in decode_csv_bytes(content)
