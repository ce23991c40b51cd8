"""Tests for Corchete utility modules."""

import pytest


class TestUnescapeBackslashes:
    """Tests for unescape_backslashes."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            (r"a\nb", "a\nb"),
            (r"a\tb", "a\tb"),
            (r"\r\a\v\b\f", "\r\a\v\b\f"),
            (r"back\\slash", "back\\slash"),
            (r"\"quoted\"", '"quoted"'),
            (r"\x41\x4a", "AJ"),
            (r"\x4", "\x04"),
            (r"\101\102", "AB"),
            (r"\0", "\x00"),
            (r"\q", "q"),
            (r"\]", "]"),
        ],
    )
    def test_sequences(self, raw: str, expected: str) -> None:
        from corchete.utils.text import unescape_backslashes

        assert unescape_backslashes(raw) == expected

    def test_trailing_backslash_kept(self) -> None:
        from corchete.utils.text import unescape_backslashes

        assert unescape_backslashes("end\\") == "end\\"

    def test_hex_without_digits_is_plain_x(self) -> None:
        from corchete.utils.text import unescape_backslashes

        assert unescape_backslashes(r"\xyz") == "xyz"

    def test_octal_wraps_to_byte(self) -> None:
        from corchete.utils.text import unescape_backslashes

        # 0o777 == 511, wrapped to 255
        assert unescape_backslashes(r"\777") == "\xff"


class TestCollapseSpaces:
    """Tests for collapse_spaces."""

    def test_non_breaking_space(self) -> None:
        from corchete.utils.text import collapse_spaces

        assert collapse_spaces("a\u00a0b") == "a b"

    def test_zero_width_space(self) -> None:
        from corchete.utils.text import collapse_spaces

        assert collapse_spaces("a\u200bb") == "a b"

    def test_runs_collapse_to_one(self) -> None:
        from corchete.utils.text import collapse_spaces

        assert collapse_spaces("a\u00a0\u200b\u00a0b") == "a b"

    def test_ordinary_spaces_untouched(self) -> None:
        from corchete.utils.text import collapse_spaces

        assert collapse_spaces("a   b") == "a   b"


class TestGetLogger:
    """Tests for get_logger namespacing."""

    def test_prefixes_foreign_names(self) -> None:
        from corchete.utils.logger import get_logger

        assert get_logger("mymodule").name == "corchete.mymodule"

    def test_keeps_package_names(self) -> None:
        from corchete.utils.logger import get_logger

        assert get_logger("corchete.engine").name == "corchete.engine"
        assert get_logger("corchete").name == "corchete"
