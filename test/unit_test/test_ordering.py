from imgpack.component.ordering import numeric_prefix, sort_key, order_entries


def test_numeric_prefix():
    assert numeric_prefix("12foo") == 12
    assert numeric_prefix("007") == 7
    assert numeric_prefix("abc") is None
    assert numeric_prefix("a12") is None
    assert numeric_prefix("") is None


def test_numeric_prefix_overflow():
    assert numeric_prefix("18446744073709551615x") == 2**64 - 1
    assert numeric_prefix("18446744073709551616x") is None


def test_numbers_before_names():
    assert sort_key("3bar") < sort_key("12foo")
    assert sort_key("999x") < sort_key("abc")
    assert sort_key("99999999999999999999") > sort_key("5")


def test_ties_by_full_name():
    assert sort_key("10B") < sort_key("10a")
    assert sort_key("010") < sort_key("10")
    assert sort_key("Zeta") < sort_key("alpha")


def test_order_entries():
    entries = [{"abc": "p1"}, {"12foo": "p2"}, {"3bar": "p3"}, {"999x": "p4"}, {"3Bar": "p5"}]
    ordered = order_entries(entries)
    assert [next(iter(e)) for e in ordered] == ["3Bar", "3bar", "12foo", "999x", "abc"]
    # the input is not modified
    assert next(iter(entries[0])) == "abc"


def test_duplicates_are_kept_stable():
    entries = [{"1a": "first"}, {"0": "x"}, {"1a": "second"}]
    assert order_entries(entries) == [{"0": "x"}, {"1a": "first"}, {"1a": "second"}]
