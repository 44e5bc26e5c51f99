"""Soundex phonetic encoding."""

from typing import Dict

CODE_LENGTH = 4

SOUNDEX_CODES: Dict[str, str] = {
    **dict.fromkeys('BFPV', '1'),
    **dict.fromkeys('CGJKQSXZ', '2'),
    **dict.fromkeys('DT', '3'),
    'L': '4',
    **dict.fromkeys('MN', '5'),
    'R': '6',
}
VOWELS = frozenset('AEIOU')
TRANSPARENT = frozenset('HWY')


def _code(letter: str) -> str:
    return SOUNDEX_CODES.get(letter, '0')


def soundex(word: str) -> str:
    """
    Encode a word as a four character Soundex code.

    Non-letters are dropped before encoding. The first letter is kept, H, W
    and Y are ignored, and adjacent letters sharing a code collapse into one
    digit unless a vowel separates them. The code is padded with zeros or
    truncated to four characters.

    Args:
        word: Word to encode

    Returns:
        str: Soundex code, or an empty string when the word has no letters
    """
    letters = ''.join(c for c in word if c.isalpha()).upper()
    if not letters:
        return ''

    first_letter = letters[0]
    encoded = [first_letter]

    prev_letter = first_letter
    prev_code = _code(first_letter)
    was_vowel = first_letter in VOWELS

    for letter in letters[1:]:
        if letter in TRANSPARENT:
            continue
        if letter in VOWELS:
            was_vowel = True
            continue

        code = _code(letter)
        # Side-by-side letters only count twice across a vowel
        if was_vowel or (code != prev_code and letter != prev_letter):
            encoded.append(code)

        was_vowel = False
        prev_code = code
        prev_letter = letter

    return ''.join(encoded)[:CODE_LENGTH].ljust(CODE_LENGTH, '0')
