import io

from addressbook.services.outputs import (
    format_error_list,
    format_validation_failure,
    write_lines,
)


def test_format_error_list_quotes_each_message():
    assert format_error_list([]) == "[]"
    assert format_error_list(["a"]) == '["a"]'
    assert format_error_list(["a", "b"]) == '["a", "b"]'
    assert format_error_list(['say "hi"']) == '["say \\"hi\\""]'


def test_format_validation_failure():
    line = format_validation_failure("42", ["You must include a country", "You must include a valid postal code"])

    assert line == (
        'Address for ID: 42 is invalid. Validation errors: '
        '["You must include a country", "You must include a valid postal code"]'
    )


def test_write_lines_to_stream():
    buffer = io.StringIO()
    write_lines(["first", "second"], buffer)

    assert buffer.getvalue() == "first\nsecond\n"
