import pytest

from code128b.symbols import (
    CHAR_COUNT,
    INDEX_START_CODE_B,
    INDEX_STOP_CODE,
    MODULE_LEN,
    SYMBOL_TABLE,
    SymbolTableEntry,
    lookup_index_by_character,
    pattern_for,
    resolve_index,
)


class TestSymbolTable:
    def test_has_107_entries_in_index_order(self) -> None:
        assert len(SYMBOL_TABLE) == 107
        assert [e.index for e in SYMBOL_TABLE] == list(range(107))

    def test_every_pattern_is_eleven_modules(self) -> None:
        for entry in SYMBOL_TABLE:
            assert len(entry.pattern) == MODULE_LEN
            assert set(entry.pattern) <= {"0", "1"}

    def test_control_symbols(self) -> None:
        assert INDEX_START_CODE_B == 104
        assert INDEX_STOP_CODE == 106
        assert pattern_for(INDEX_START_CODE_B) == "11010010000"
        assert pattern_for(INDEX_STOP_CODE) == "11000111010"
        assert all(e.character == "*" for e in SYMBOL_TABLE[103:])

    def test_entries_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            SYMBOL_TABLE[0].pattern = "00000000000"  # type: ignore[misc]

    def test_table_kept_as_shipped(self) -> None:
        assert SYMBOL_TABLE[2] == SymbolTableEntry(2, "~", "11001100110")
        assert SYMBOL_TABLE[28].character == "{"
        assert SYMBOL_TABLE[91].character == "{"
        assert {e.character for e in SYMBOL_TABLE[94:99]} == {"E"}
        assert {e.character for e in SYMBOL_TABLE[99:103]} == {"I"}


class TestLookup:
    @pytest.mark.parametrize(
        "char, index",
        [(" ", 0), ("!", 1), ("0", 16), ("A", 33), ("Z", 58), ("\\", 60), ("a", 65), ("z", 90), ("|", 92)],
    )
    def test_known_characters(self, char: str, index: int) -> None:
        assert lookup_index_by_character(char) == index

    def test_first_match_wins_for_duplicates(self) -> None:
        assert lookup_index_by_character("{") == 28
        assert lookup_index_by_character("}") == 30
        assert lookup_index_by_character("E") == 37
        assert lookup_index_by_character("I") == 41

    def test_control_symbols_not_reachable_by_character(self) -> None:
        # '*' resolves to the data character at 10, never to a start/stop code
        assert lookup_index_by_character("*") == 10

    def test_unknown_characters(self) -> None:
        assert lookup_index_by_character("\x01") is None
        assert lookup_index_by_character("é") is None
        assert lookup_index_by_character('"') is None
        assert lookup_index_by_character("") is None


class TestResolveIndex:
    def test_known_character(self) -> None:
        assert resolve_index("B") == 34

    def test_unknown_character_becomes_space(self) -> None:
        assert resolve_index("\t") == 0
        assert resolve_index("€") == 0

    def test_always_in_data_range(self) -> None:
        for code in range(0, 256):
            assert 0 <= resolve_index(chr(code)) < CHAR_COUNT
