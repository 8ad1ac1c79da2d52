"""Code128 symbol table and character lookup.

Every symbol is a data row: its value (used in checksum arithmetic), the
Subset B character it stands for and its 11-module bar/space pattern.
Rows 103-106 are control symbols and carry '*' as a placeholder.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SymbolTableEntry:
    index: int
    character: str
    pattern: str


INDEX_START_CODE_B = 104      # start code for alphabet B
INDEX_STOP_CODE = 106
MODULE_LEN = 11               # modules per pattern
CHAR_COUNT = 103              # data characters in the alphabet
SEQUENCE_TERMINATOR = "11"

_ROWS = [
    (0, " ", "11011001100"),
    (1, "!", "11001101100"),
    (2, "~", "11001100110"),
    (3, "#", "10010011000"),
    (4, "$", "10010001100"),
    (5, "%", "10001001100"),
    (6, "&", "10011001000"),
    (7, "'", "10011000100"),
    (8, "(", "10001100100"),
    (9, ")", "11001001000"),
    (10, "*", "11001000100"),
    (11, "+", "11000100100"),
    (12, ",", "10110011100"),
    (13, "-", "10011011100"),
    (14, ".", "10011001110"),
    (15, "/", "10111001100"),
    (16, "0", "10011101100"),
    (17, "1", "10011100110"),
    (18, "2", "11001110010"),
    (19, "3", "11001011100"),
    (20, "4", "11001001110"),
    (21, "5", "11011100100"),
    (22, "6", "11001110100"),
    (23, "7", "11101101110"),
    (24, "8", "11101001100"),
    (25, "9", "11100101100"),
    (26, ":", "11100100110"),
    (27, ";", "11101100100"),
    (28, "{", "11100110100"),
    (29, "=", "11100110010"),
    (30, "}", "11011011000"),
    (31, "?", "11011000110"),
    (32, "@", "11000110110"),
    (33, "A", "10100011000"),
    (34, "B", "10001011000"),
    (35, "C", "10001000110"),
    (36, "D", "10110001000"),
    (37, "E", "10001101000"),
    (38, "F", "10001100010"),
    (39, "G", "11010001000"),
    (40, "H", "11000101000"),
    (41, "I", "11000100010"),
    (42, "J", "10110111000"),
    (43, "K", "10110001110"),
    (44, "L", "10001101110"),
    (45, "M", "10111011000"),
    (46, "N", "10111000110"),
    (47, "O", "10001110110"),
    (48, "P", "11101110110"),
    (49, "Q", "11010001110"),
    (50, "R", "11000101110"),
    (51, "S", "11011101000"),
    (52, "T", "11011100010"),
    (53, "U", "11011101110"),
    (54, "V", "11101011000"),
    (55, "W", "11101000110"),
    (56, "X", "11100010110"),
    (57, "Y", "11101101000"),
    (58, "Z", "11101100010"),
    (59, "[", "11100011010"),
    (60, "\\", "11101111010"),
    (61, "]", "11001000010"),
    (62, "^", "11110001010"),
    (63, "_", "10100110000"),
    (64, "`", "10100001100"),
    (65, "a", "10010110000"),
    (66, "b", "10010000110"),
    (67, "c", "10000101100"),
    (68, "d", "10000100110"),
    (69, "e", "10110010000"),
    (70, "f", "10110000100"),
    (71, "g", "10011010000"),
    (72, "h", "10011000010"),
    (73, "i", "10000110100"),
    (74, "j", "10000110010"),
    (75, "k", "11000010010"),
    (76, "l", "11001010000"),
    (77, "m", "11110111010"),
    (78, "n", "11000010100"),
    (79, "o", "10001111010"),
    (80, "p", "10100111100"),
    (81, "q", "10010111100"),
    (82, "r", "10010011110"),
    (83, "s", "10111100100"),
    (84, "t", "10011110100"),
    (85, "u", "10011110010"),
    (86, "v", "11110100100"),
    (87, "w", "11110010100"),
    (88, "x", "11110010010"),
    (89, "y", "11011011110"),
    (90, "z", "11011110110"),
    (91, "{", "11110110110"),
    (92, "|", "10101111000"),
    (93, "}", "10100011110"),
    (94, "E", "10001011110"),
    (95, "E", "10111101000"),
    (96, "E", "10111100010"),
    (97, "E", "11110101000"),
    (98, "E", "11110100010"),
    (99, "I", "10111011110"),
    (100, "I", "10111101110"),
    (101, "I", "11101011110"),
    (102, "I", "11110101110"),
    (103, "*", "11010000100"),  # Start Code A
    (104, "*", "11010010000"),  # Start Code B
    (105, "*", "11010011100"),  # Start Code C
    (106, "*", "11000111010"),  # STOP
]

SYMBOL_TABLE = tuple(SymbolTableEntry(*row) for row in _ROWS)
del _ROWS


def lookup_index_by_character(c: str) -> Optional[int]:
    """Return the index of the first data entry whose character is ``c``.

    Only the data range is scanned, so the control symbols can never be
    reached by character. Duplicated characters resolve to the lowest index.
    """
    for entry in SYMBOL_TABLE[:CHAR_COUNT]:
        if entry.character == c:
            return entry.index
    return None


def resolve_index(c: str) -> int:
    """Index used to encode ``c``; unknown characters map to 0 (space)."""
    index = lookup_index_by_character(c)
    if index is None or not 0 <= index < CHAR_COUNT:
        return 0
    return index


def pattern_for(index: int) -> str:
    return SYMBOL_TABLE[index].pattern
