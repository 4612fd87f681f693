from netremote.services.extensions import DEFAULT_MUSIC_EXTENSIONS, join_extension_list, parse_extension_list


def test_drops_empty_and_long_entries():
    assert parse_extension_list("mp3, , toolongext, ogg,flac") == ["mp3", "ogg", "flac"]


def test_length_boundaries():
    assert parse_extension_list("a,abcdefg,abcdefgh") == ["a", "abcdefg"]


def test_trims_before_measuring():
    assert parse_extension_list("   abcdefg   ,\tmp3\n") == ["abcdefg", "mp3"]


def test_keeps_order_and_duplicates():
    assert parse_extension_list("ogg,mp3,ogg") == ["ogg", "mp3", "ogg"]


def test_empty_input():
    assert parse_extension_list("") == []
    assert parse_extension_list(" , ,") == []
    assert parse_extension_list(None) == []


def test_default_list_survives_parsing():
    assert parse_extension_list(join_extension_list(DEFAULT_MUSIC_EXTENSIONS)) == DEFAULT_MUSIC_EXTENSIONS


def test_never_returns_invalid_entries():
    raw = ",".join(["", " ", "x", "xxxxxxx", "xxxxxxxx", "  spaced  ", "a b", "ünïcödé"])
    for ext in parse_extension_list(raw):
        assert 0 < len(ext.strip()) < 8
