from termgit.version import Version


def test_display():
    assert str(Version(1, 2, 3)) == "v1.2.3"


def test_default_is_zero():
    assert Version() == Version(0, 0, 0)


def test_parse_round_trip():
    v = Version(4, 10, 22)
    assert Version.parse(str(v)[1:]) == v


def test_parse_ignores_prerelease():
    assert Version.parse("2.5.1-beta") == Version(2, 5, 1)


def test_missing_parts_become_zero():
    assert Version.parse("7") == Version(7, 0, 0)


def test_overflow_becomes_zero():
    assert Version.parse(f"{2**32}.1.1").major == 0