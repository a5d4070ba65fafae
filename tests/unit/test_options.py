from progen.cli.options import Option, parse_options


def test_named_option_takes_following_value():
    options = parse_options(["--name", "value"])
    assert options.entries == (Option("name", "value"),)


def test_option_followed_by_option_is_flag():
    options = parse_options(["--first", "--second", "value"])
    assert options.entries == (
        Option("first"),
        Option("second", "value"),
    )


def test_last_option_is_flag():
    options = parse_options(["out.pro", "--verbose"])
    assert options.entries == (Option(None, "out.pro"), Option("verbose"))
    assert options.entries[1].is_flag


def test_bare_tokens_are_positional():
    options = parse_options(["a", "b"])
    assert all(option.is_positional for option in options.entries)
    assert [option.value for option in options.entries] == ["a", "b"]


def test_unknown_option_swallows_next_token():
    options = parse_options(["--verbose", "out.pro"])
    assert options.value(None) is None
    assert options.value("verbose") == "out.pro"


def test_declared_flags_never_take_a_value():
    options = parse_options(["--verbose", "out.pro"], flags=["verbose"])
    assert options.present("verbose")
    assert options.value(None, -1) == "out.pro"


def test_value_index_lookup():
    options = parse_options(["--d", "1", "x", "--d", "2", "y"])

    assert options.value("d") == "1"
    assert options.value("d", 1) == "2"
    assert options.value("d", -1) == "2"
    assert options.value(None, -1) == "y"


def test_value_out_of_range_is_none():
    options = parse_options(["--d", "1"])

    assert options.value("d", 1) is None
    assert options.value("d", -2) is None
    assert options.value("missing") is None
    assert options.value("missing", -1) is None


def test_flag_value_is_none():
    options = parse_options(["--flag"])
    assert options.present("flag")
    assert options.value("flag") is None
    assert options.entries == (Option("flag"),)


def test_empty_argv():
    options = parse_options([])
    assert options.entries == ()
    assert options.present(None) is False
