"""
Seed derivation: user seed + page -> page seed -> item seed.

All arithmetic is exact integer math reduced with masks; floats never touch a
seed, so seeds above 2**53 keep their low bits.
"""

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

PAGE_MULTIPLIER = 1103515245
PAGE_INCREMENT = 12345


def normalize_user_seed(seed: int) -> int:
    """Wrap any integer into the unsigned 64-bit range."""
    return int(seed) & MASK64


def normalize_item_seed(seed: int) -> int:
    return int(seed) & MASK32


def parse_user_seed(text: str) -> int:
    """Parse a decimal seed string and wrap it to 64 bits.

    Raises ValueError for anything that is not an integer literal.
    """
    value = str(text).strip()
    if not value:
        return 0
    return normalize_user_seed(int(value, 10))


def parse_item_seed(text: str) -> int:
    return normalize_item_seed(int(str(text).strip(), 10))


def page_seed(user_seed: int, page: int) -> int:
    combined = (normalize_user_seed(user_seed) * PAGE_MULTIPLIER
                + (int(page) & MASK64) * PAGE_INCREMENT) & MASK64
    return combined & MASK32


def item_seed(page_seed_value: int, slot_offset: int) -> int:
    return (int(page_seed_value) + int(slot_offset)) & MASK32
