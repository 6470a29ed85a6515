"""Tests for the forward tokenizer and line splitting."""

from jailfmt.lexer.models import Token, TokenKind
from jailfmt.lexer.tokenizer import first_token, split_lines, tokenize


def _texts(source: str, **kwargs) -> list[str]:
    return [t.text for t in tokenize(source, **kwargs)]


class TestTokenize:
    def test_empty_input(self):
        assert list(tokenize("")) == []
        assert list(tokenize("   \n\t\n")) == []

    def test_words_and_punctuation(self):
        tokens = list(tokenize("private-bin bash,sh"))
        assert [t.text for t in tokens] == ["private-bin", "bash", ",", "sh"]
        assert [t.kind for t in tokens] == [
            TokenKind.WORD, TokenKind.WORD, TokenKind.PUNCTUATION, TokenKind.WORD,
        ]

    def test_path_is_one_token(self):
        assert list(tokenize("/usr/bin/firefox")) == [
            Token("/usr/bin/firefox", 0, 16, TokenKind.WORD),
        ]

    def test_dotted_and_variable_words(self):
        assert _texts("seccomp.drop @clock") == ["seccomp.drop", "@clock"]
        assert _texts("whitelist ${HOME}/.cache") == ["whitelist", "${HOME}/.cache"]
        assert _texts("noblacklist ${HOME}/.local/share/app's") == [
            "noblacklist", "${HOME}/.local/share/app's",
        ]

    def test_punctuation_run(self):
        assert _texts("seccomp !chroot") == ["seccomp", "!", "chroot"]
        assert _texts("a,;b") == ["a", ",;", "b"]

    def test_unterminated_variable_is_plain_text(self):
        assert _texts("${HOME") == ["${HOME"]

    def test_comments_skipped(self):
        assert _texts("noblacklist /tmp # comment\ninclude x") == [
            "noblacklist", "/tmp", "include", "x",
        ]
        assert _texts("# only a comment") == []

    def test_comment_ends_word(self):
        assert _texts("/usr/bin#x") == ["/usr/bin"]

    def test_comments_yielded_on_request(self):
        tokens = list(tokenize("noblacklist /tmp # comment\n", include_comments=True))
        assert tokens[-1] == Token("# comment", 17, 26, TokenKind.COMMENT)

    def test_comment_excludes_carriage_return(self):
        tokens = list(tokenize("a # c\r\nb", include_comments=True))
        assert [t.text for t in tokens] == ["a", "# c", "b"]

    def test_offsets_are_absolute(self):
        tokens = list(tokenize("a\nbb"))
        assert (tokens[1].start, tokens[1].end) == (2, 4)

    def test_restartable(self):
        source = "caps.drop all"
        assert list(tokenize(source)) == list(tokenize(source))


class TestFirstToken:
    def test_skips_leading_whitespace(self):
        token = first_token("   include foo")
        assert token is not None
        assert token.text == "include"

    def test_blank_and_comment_lines(self):
        assert first_token("") is None
        assert first_token("   ") is None
        assert first_token("# include") is None


class TestSplitLines:
    def test_endings_preserved(self):
        assert list(split_lines("a\r\nb\n\nc")) == [
            ("a", "\r\n"), ("b", "\n"), ("", "\n"), ("c", ""),
        ]

    def test_trailing_newline(self):
        assert list(split_lines("a\n")) == [("a", "\n")]

    def test_empty(self):
        assert list(split_lines("")) == []

    def test_form_feed_is_not_a_line_break(self):
        assert list(split_lines("a\fb\n")) == [("a\fb", "\n")]
