import pytest

from zipkit.tokenizer import Tokenizer


def test_tokens_on_a_line():
    tok = Tokenizer.from_contents("keys.txt", "key  A  B\nnext")
    assert tok.next_token(" ") == "key"
    tok.skip_delimiters(" ")
    assert tok.next_token(" ") == "A"
    tok.skip_delimiters(" ")
    assert tok.next_token(" ") == "B"
    assert tok.is_eol()
    assert not tok.is_eof()


def test_location_format():
    tok = Tokenizer.from_contents("MyFile.txt", "a\nb\n")
    assert tok.location() == "MyFile.txt:1"
    tok.next_line()
    assert tok.line_number == 2
    assert tok.location() == f"MyFile.txt:{tok.line_number}"


def test_peek_remainder_does_not_advance():
    tok = Tokenizer.from_contents("f", "first line\nsecond")
    assert tok.peek_remainder_of_line() == "first line"
    assert tok.peek_char() == "f"
    tok.next_line()
    assert tok.peek_remainder_of_line() == "second"


def test_next_line_at_end_is_noop():
    tok = Tokenizer.from_contents("f", "only")
    tok.next_line()
    assert tok.is_eof()
    line = tok.line_number
    tok.next_line()
    assert tok.line_number == line
    assert tok.peek_char() == ""
    assert tok.next_char() == ""


def test_next_char_advances():
    text = "xy"
    tok = Tokenizer.from_contents("f", text)
    assert tok.next_char() + tok.next_char() == text
    assert tok.is_eof()


def test_nul_is_a_delimiter():
    tok = Tokenizer.from_contents("f", "ab\0cd")
    assert tok.next_token("") == "ab"
    tok.skip_delimiters("")
    assert tok.next_token("") == "cd"


def test_token_stops_at_newline():
    tok = Tokenizer.from_contents("f", "abc\ndef")
    assert tok.next_token(" ") == "abc"
    assert tok.peek_char() == "\n"
    assert tok.next_token(" ") == ""


def test_open_reads_file(tmp_path):
    path = tmp_path / "map.kl"
    path.write_text("key 1 A\n")
    tok = Tokenizer.open(path)
    assert tok.peek_remainder_of_line() == "key 1 A"
    assert tok.filename == str(path)


def test_open_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Tokenizer.open(tmp_path / "missing")