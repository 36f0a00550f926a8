import pytest

from errors import ValidationFailure
from prompts import ConsolePrompter, validate_volume


def console(answers):
    answers = list(answers)
    out = []
    return ConsolePrompter(read=lambda _prompt: answers.pop(0), write=out.append), out


class TestValidateVolume:
    @pytest.mark.parametrize("text,expected", [("0", 0), ("100", 100), (" 42 ", 42)])
    def test_accepts(self, text, expected):
        assert validate_volume(text) == expected

    @pytest.mark.parametrize("text", ["101", "-1", "abc", "", "4.5", "\u00b2", "\u0664\u0662"])
    def test_rejects(self, text):
        with pytest.raises(ValidationFailure):
            validate_volume(text)


class TestConsolePrompter:
    def test_ask_volume_reprompts_until_valid(self):
        p, out = console(["loud", "150", "30"])
        assert p.ask_volume("Headphones", 70) == 30
        assert out.count("Volume has to be a number between 0 and 100") == 2

    def test_ask_volume_reprompts_on_superscript_digit(self):
        p, out = console(["\u00b2", "30"])
        assert p.ask_volume("Headphones", 70) == 30
        assert out == ["Volume has to be a number between 0 and 100"]

    def test_ask_volume_default(self):
        p, _ = console([""])
        assert p.ask_volume("Headphones", 70) == 70

    def test_select_many(self):
        p, _ = console(["3, 1 3"])
        assert p.select_many("Select sinks to combine", ["a", "b", "c"]) == [0, 2]

    def test_select_many_rejects_out_of_range(self):
        p, out = console(["4", "2"])
        assert p.select_many("Pick", ["a", "b", "c"]) == [1]
        assert "Only numbers between 1 and 3 are allowed" in out

    def test_select_many_reprompts_on_superscript_digit(self):
        p, out = console(["\u00b9", "1"])
        assert p.select_many("Pick", ["a", "b"]) == [0]
        assert "Only numbers between 1 and 2 are allowed" in out

    def test_select_many_empty(self):
        p, _ = console([""])
        assert p.select_many("Pick", ["a"]) == []

    def test_choose(self):
        p, _ = console(["x", "2"])
        assert p.choose("What to do?", ["a", "b", "c"]) == 1

    def test_choose_reprompts_on_superscript_digit(self):
        p, out = console(["\u00b2", "2"])
        assert p.choose("What to do?", ["a", "b"]) == 1
        assert "Enter a number between 1 and 2" in out

    def test_choose_default(self):
        p, _ = console([""])
        assert p.choose("What to do?", ["a", "b"], default=1) == 1
