from minishparse.environment import parse_environ, split_path


def test_parse_simple_entries():
    env = parse_environ(["HOME=/home/user", "PATH=/bin:/usr/bin"])
    assert env == {"HOME": "/home/user", "PATH": "/bin:/usr/bin"}


def test_parse_keeps_order():
    env = parse_environ(["B=2", "A=1", "C=3"])
    assert list(env) == ["B", "A", "C"]


def test_value_may_contain_equals():
    assert parse_environ(["A=b=c"]) == {"A": "b=c"}


def test_entry_without_equals_has_empty_value():
    assert parse_environ(["FLAG"]) == {"FLAG": ""}


def test_first_duplicate_wins():
    assert parse_environ(["A=first", "A=second"]) == {"A": "first"}


def test_mapping_is_copied():
    source = {"X": "y"}
    env = parse_environ(source)
    assert env == source
    env["X"] = "z"
    assert source["X"] == "y"


def test_split_path_drops_empty_fields():
    assert split_path({"PATH": "/bin::/usr/bin:"}) == ["/bin", "/usr/bin"]


def test_split_path_without_path():
    assert split_path({"HOME": "/home/user"}) == []


def test_split_path_prefix_key_matches():
    assert split_path({"PA": "/x:/y"}) == ["/x", "/y"]


def test_split_path_longer_key_does_not_match():
    assert split_path({"PATHX": "/x"}) == []


def test_split_path_uses_first_match():
    env = parse_environ(["P=/first", "PATH=/second"])
    assert split_path(env) == ["/first"]