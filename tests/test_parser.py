import pytest

from raftcore.datadriven.parser import (
    CmdArg,
    DirectiveError,
    TestData,
    parse_line,
    split_directives,
)


def test_parse_line():
    cmd, cmd_args = parse_line("cmd a=1 b=(2,3) c= d")
    assert cmd == "cmd"
    assert str(cmd_args) == "[a=1, b=(2,3), c=, d]"


def test_parse_line_values():
    cmd, cmd_args = parse_line("cmd a=1 b=(2,3) c= d")
    assert [(a.key, a.vals) for a in cmd_args] == [
        ("a", ["1"]),
        ("b", ["2", "3"]),
        ("c", [""]),
        ("d", []),
    ]


def test_parse_line_trims_parenthesised_values():
    _, cmd_args = parse_line("cmd k=( 1 , 2 )")
    assert cmd_args[0].key == "k"
    assert cmd_args[0].vals == ["1", "2"]


def test_parse_line_empty_parens():
    _, cmd_args = parse_line("cmd c=()")
    assert cmd_args[0].vals == [""]


def test_parse_line_comma_value_is_single():
    _, cmd_args = parse_line("cmd b=2,2,2")
    assert cmd_args[0].vals == ["2,2,2"]


def test_parse_empty_line():
    assert parse_line("") == ("", [])


def test_parse_line_error():
    with pytest.raises(DirectiveError):
        parse_line("cmd a=(1")


def test_split_directives():
    assert split_directives("cmd a=1 b=2,2,2 c=(3,33,3333)") == [
        "cmd",
        "a=1",
        "b=2,2,2",
        "c=(3,33,3333)",
    ]
    assert split_directives("cmd a b c") == ["cmd", "a", "b", "c"]
    assert split_directives("cmd") == ["cmd"]
    assert split_directives("cmd a=1 ") == ["cmd", "a=1"]


def test_split_directives_trailing_newline():
    with pytest.raises(DirectiveError) as info:
        split_directives("cmd a=1\n")
    assert str(info.value) == "cannot parse directive at column 5: cmd a=1\n"


def test_split_directives_double_trailing_space():
    with pytest.raises(DirectiveError) as info:
        split_directives("cmd a=1  ")
    assert str(info.value) == "cannot parse directive at column 9: cmd a=1  "


def test_cmd_arg_display():
    assert str(CmdArg("k")) == "k"
    assert str(CmdArg("k", ["a"])) == "k=a"
    assert str(CmdArg("k", ["a", "b"])) == "k=(a,b)"
    assert repr(CmdArg("k", ["a", "b"])) == "k=(a,b)"


def test_contains_key():
    d = TestData()
    d.cmd_args.append(CmdArg("key", ["123", "92", "92"]))
    d.cmd_args.append(CmdArg("key2", ["some string"]))
    assert d.contains_key("key2") is True
    assert d.contains_key("key1") is False