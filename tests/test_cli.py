from pathlib import Path

from addressbook.cli import EXIT_INVALID, EXIT_LOAD_ERROR, EXIT_OK, main

FIXTURE_PATH = Path(__file__).parent / "data" / "addresses.json"


def test_print_command(capsys):
    assert main(["print", "--file", str(FIXTURE_PATH)]) == EXIT_OK

    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Postal Address: Not available - City 2 - Not available - 2345 - Lebanon"
    assert len(lines) == 3


def test_validate_command_reports_invalid_addresses(capsys):
    assert main(["validate", "--file", str(FIXTURE_PATH)]) == EXIT_INVALID

    lines = capsys.readouterr().out.splitlines()
    assert [line.split(" is invalid")[0] for line in lines] == [
        "Address for ID: 2",
        "Address for ID: 3",
    ]


def test_validate_command_all_valid(tmp_path: Path, capsys):
    source = tmp_path / "valid.json"
    source.write_text(
        '[{"id": "1", "type": {"name": "Physical Address"}, "addressLineDetail": {"line1": "1 Main Road"},'
        ' "country": {"code": "LB", "name": "Lebanon"}, "cityOrTown": "Beirut", "postalCode": "1107",'
        ' "lastUpdated": "2020-01-01"}]',
        encoding="utf-8",
    )

    assert main(["validate", "--file", str(source)]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_load_error_exits_with_message(tmp_path: Path, capsys):
    assert main(["print", "--file", str(tmp_path / "missing.json")]) == EXIT_LOAD_ERROR

    assert "Error: error importing json file: " in capsys.readouterr().err


def test_gcd_command(capsys):
    assert main(["gcd", "4", "64", "32", "120"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "4"


def test_non_utf8_file_exits_with_message(tmp_path: Path, capsys):
    source = tmp_path / "latin1.json"
    source.write_bytes(b'[{"id": "\xe9"}]')

    assert main(["print", "--file", str(source)]) == EXIT_LOAD_ERROR

    assert "Error: error importing json file: " in capsys.readouterr().err
