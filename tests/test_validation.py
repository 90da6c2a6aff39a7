import pytest

from userprompt.validation import is_exit, is_numeric, valid_age, valid_city, valid_name


class TestIsExit:
    def test_case_insensitive(self):
        assert is_exit("exit")
        assert is_exit("EXIT")
        assert is_exit("ExIt")

    def test_not_trimmed(self):
        assert not is_exit(" exit")
        assert not is_exit("exit ")
        assert not is_exit("exits")


class TestIsNumeric:
    @pytest.mark.parametrize(
        "text",
        ["30", "30.5", "-2", "+4", " 42 ", ".5", "5.", "1e3", "-1.5E-2", "0x1A", "0b101", "Infinity", "-Infinity"],
    )
    def test_accepts(self, text):
        assert is_numeric(text)

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "12abc", "1 2", "1_000", ".", "-", "e5", "nan", "inf", "infinity", "-0x1A", "0x", "\u0663\u0660", "\uff13\uff10"],
    )
    def test_rejects(self, text):
        assert not is_numeric(text)


class TestFieldPredicates:
    def test_name(self):
        assert valid_name("Alice")
        assert not valid_name(" \t ")

    def test_age(self):
        assert valid_age("30")
        assert not valid_age("")
        assert not valid_age("thirty")

    def test_city(self):
        assert valid_city(" Paris ")
        assert not valid_city("")

    def test_byte_order_mark_is_blank(self):
        assert not valid_name("\ufeff")
        assert not valid_city("\u3000\ufeff")
        assert valid_age("\ufeff12\u00a0")

    def test_control_separators_are_not_blank(self):
        assert valid_name("\x1c")
        assert valid_name("\x85")
