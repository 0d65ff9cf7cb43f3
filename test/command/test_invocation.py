"""参数切分测试"""

from proxyadmin.command import CommandInvocation, split_arguments


class TestSplitArguments:
    def test_whitespace_split(self):
        assert split_arguments("  dump   now\t") == ("dump", "now")

    def test_empty_line(self):
        assert split_arguments("") == ()

    def test_trailing_space_kept_for_suggestion(self):
        assert split_arguments("plugins ", keep_trailing=True) == ("plugins", "")

    def test_no_trailing_space(self):
        assert split_arguments("pl", keep_trailing=True) == ("pl",)


class TestCommandInvocation:
    def test_first_and_rest(self, admin_source):
        invocation = CommandInvocation.parse(admin_source, "Reload a b")
        assert invocation.first == "Reload"
        assert invocation.rest == ("a", "b")

    def test_empty(self, admin_source):
        invocation = CommandInvocation.parse(admin_source, "")
        assert invocation.first == ""
        assert invocation.rest == ()
