import pytest

from code128b.encoder import QUIET_ZONE, checksum_index, encode
from code128b.symbols import pattern_for

START_B = "11010010000"
STOP = "11000111010"


class TestEncodeLength:
    @pytest.mark.parametrize("text", ["", "A", "Code128B", "hello world", "~" * 40])
    def test_length_without_quiet_zone(self, text: str) -> None:
        assert len(encode(text)) == 11 * (len(text) + 3) + 2

    @pytest.mark.parametrize("text", ["", "A", "Code128B"])
    def test_length_with_quiet_zone(self, text: str) -> None:
        assert len(encode(text, add_quiet_zone=True)) == 11 * (len(text) + 3) + 22

    def test_only_modules(self) -> None:
        assert set(encode("Any text 123!")) <= {"0", "1"}


class TestEncode:
    def test_empty_text(self) -> None:
        assert checksum_index("") == 1
        assert encode("") == START_B + pattern_for(1) + STOP + "11"

    def test_single_character(self) -> None:
        # 104 + 1 * 33 = 137, 137 % 103 = 34
        assert checksum_index("A") == 34
        assert encode("A") == START_B + "10100011000" + pattern_for(34) + STOP + "11"

    def test_position_weighted_checksum(self) -> None:
        assert checksum_index("Code128B") == 71
        assert checksum_index("AB") == (104 + 33 + 2 * 34) % 103

    def test_data_patterns_in_order(self) -> None:
        seq = encode("Hi")
        assert seq[11:22] == pattern_for(40)
        assert seq[22:33] == pattern_for(73)

    def test_ends_with_stop_and_terminator(self) -> None:
        assert encode("xyz").endswith(STOP + "11")

    def test_deterministic(self) -> None:
        assert encode("Code128B") == encode("Code128B")


class TestSubstitution:
    @pytest.mark.parametrize("bad", ["\x00", "\n", "ä", '"'])
    def test_unsupported_character_encodes_as_space(self, bad: str) -> None:
        assert encode(f"A{bad}B") == encode("A B")

    def test_substitute_contributes_zero_to_checksum(self) -> None:
        assert checksum_index("\x07\x07") == checksum_index("  ") == 104 % 103

    def test_never_raises(self) -> None:
        text = "".join(chr(c) for c in range(0, 300))
        assert len(encode(text)) == 11 * (len(text) + 3) + 2


class TestQuietZone:
    def test_ten_blank_modules_each_side(self) -> None:
        seq = encode("Code128B", add_quiet_zone=True)
        assert QUIET_ZONE == "0" * 10
        assert seq[:10] == QUIET_ZONE
        assert seq[-10:] == QUIET_ZONE

    def test_wraps_plain_sequence(self) -> None:
        plain = encode("Code128B")
        assert encode("Code128B", add_quiet_zone=True) == QUIET_ZONE + plain + QUIET_ZONE
