import logging

from code128b.symbols import (
    CHAR_COUNT,
    INDEX_START_CODE_B,
    INDEX_STOP_CODE,
    MODULE_LEN,
    SEQUENCE_TERMINATOR,
    pattern_for,
    resolve_index,
)

logger = logging.getLogger(__name__)

QUIET_ZONE = "0" * (MODULE_LEN - 1)


def checksum_index(text: str) -> int:
    """Position-weighted modulo-103 check value, seeded with the start code."""
    checksum = INDEX_START_CODE_B
    for pos, c in enumerate(text):
        checksum += (pos + 1) * resolve_index(c)
    return checksum % CHAR_COUNT


def encode(text: str, add_quiet_zone: bool = False) -> str:
    """Encode ``text`` as a Code128 Subset B module sequence.

    The result is a string of '0'/'1' modules: start B, one pattern per
    character, the checksum symbol, stop and the two-module terminator.
    Characters outside the alphabet are encoded as a space; this never fails.
    """
    parts = [pattern_for(INDEX_START_CODE_B)]
    parts.extend(pattern_for(resolve_index(c)) for c in text)

    check = checksum_index(text)
    parts.append(pattern_for(check))
    parts.append(pattern_for(INDEX_STOP_CODE))
    parts.append(SEQUENCE_TERMINATOR)

    if add_quiet_zone:
        parts.insert(0, QUIET_ZONE)
        parts.append(QUIET_ZONE)

    sequence = "".join(parts)
    logger.debug("encoded %d chars into %d modules (checksum index %d)", len(text), len(sequence), check)
    return sequence
