"""Tests for the bstdemo command line program."""

import pytest

import bstmap
from bstmap import demo, log
from bstmap.tree.bstree import TreePrintMode


SAMPLE_OUTPUT = (
    "Length after insert of values[0]: 1\n"
    "Length after insert of values[1]: 2\n"
    "Length after insert of values[2]: 3\n"
    "Length after insert of values[3]: 4\n"
    "Key: 0\nPayload: cat\n\n"
    "Key: 1\nPayload: dog\n\n"
    "Key: 2\nPayload: chicken\n\n"
    "Key: 3\nPayload: hen\n\n"
)


def test_no_arguments_prints_sample(capsys):
    assert demo.bstdemo_main(["bstdemo"]) == 0
    assert capsys.readouterr().out == SAMPLE_OUTPUT


def test_post_order(capsys):
    assert demo.bstdemo_main(["bstdemo", "--order=post"]) == 0
    out = capsys.readouterr().out
    assert out.index("Key: 3") < out.index("Key: 0")


def test_delete_option(capsys):
    assert demo.bstdemo_main(["bstdemo", "-d", "1", "-d", "9"]) == 0
    out = capsys.readouterr().out
    assert "Deleted key 1: dog\n" in out
    assert "Key 9: not found\n" in out
    assert "Payload: dog" not in out


def test_input_file_with_str_keys(tmp_path, capsys):
    path = tmp_path / "animals.txt"
    path.write_text("pig oink\ncow moo\n# skipped\nant\n")
    assert demo.bstdemo_main(["bstdemo", "-k", "str", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Length after insert of values[2]: 3\n" in out
    assert out.endswith("Key: ant\nPayload: \n\n"
                        "Key: cow\nPayload: moo\n\n"
                        "Key: pig\nPayload: oink\n\n")


def test_input_file_with_dname_keys(tmp_path, capsys):
    path = tmp_path / "zone.txt"
    path.write_text("z.example. last\nexample. apex\na.example. first\n")
    assert demo.bstdemo_main(["bstdemo", "--key-type=dname",
                              str(path)]) == 0
    out = capsys.readouterr().out
    assert out.index("apex") < out.index("first") < out.index("last")


def test_malformed_file_is_fatal(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("1 one\nbad two\n")
    with pytest.raises(SystemExit) as excinfo:
        demo.bstdemo_main(["bstdemo", str(path)])
    assert excinfo.value.code == 1
    assert ":2: could not parse record key" in capsys.readouterr().err


def test_undecodable_file_is_fatal(tmp_path, capsys):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"1 caf\xe9\n")
    with pytest.raises(SystemExit) as excinfo:
        demo.bstdemo_main(["bstdemo", str(path)])
    assert excinfo.value.code == 1
    assert "invalid encoding" in capsys.readouterr().err


def test_missing_file_is_fatal(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        demo.bstdemo_main(["bstdemo", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 1
    assert "unable to read input file" in capsys.readouterr().err


def test_bad_delete_key_is_fatal(capsys):
    with pytest.raises(SystemExit) as excinfo:
        demo.bstdemo_main(["bstdemo", "-d", "one"])
    assert excinfo.value.code == 1


@pytest.mark.parametrize("argv", [
    ["bstdemo", "--order=sideways"],
    ["bstdemo", "--key-type=float"],
    ["bstdemo", "--color=sometimes"],
    ["bstdemo", "--bogus"],
    ["bstdemo", "a.txt", "b.txt"],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        demo.parse_arguments(argv)
    assert excinfo.value.code == 2


def test_parse_arguments():
    options, filename = demo.parse_arguments(
            ["bstdemo", "-vv", "-o", "pre", "-k", "dname", "-d", "a.",
             "in.txt", "--delete=b."])
    assert filename == "in.txt"
    assert options['order'] == TreePrintMode.PREORDER
    assert options['key_type'] == "dname"
    assert options['delete'] == ["a.", "b."]
    assert log.logger.loglevel == log.LOG_WARN + 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        demo.parse_arguments(["bstdemo", "--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "bstdemo " + bstmap.__version__ + "\n"


def test_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        demo.parse_arguments(["bstdemo", "--help"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("Usage: bstdemo [option]...")
