import string
from typing import Mapping

from .errors import InvalidKey

ALPHABET = string.ascii_uppercase
M = len(ALPHABET)


def _base(char: str) -> int:
    return ord('a') if char.islower() else ord('A')


def _is_letter(char: str) -> bool:
    # Only the 26 Latin letters take part in the mod-26 arithmetic.
    return char in string.ascii_letters


# --- 1. Caesar Cipher (Shift) ---
def caesar_encrypt(text: str, shift: int) -> str:
    """
    Encrypts the input text using the Caesar cipher with the given shift.
    Handles both uppercase and lowercase letters.
    Non-alphabet characters remain unchanged.
    """
    shift = shift % M
    result = []
    for char in text:
        if _is_letter(char):
            base = _base(char)
            result.append(chr((ord(char) - base + shift) % M + base))
        else:
            result.append(char)
    return ''.join(result)


def caesar_decrypt(text: str, shift: int) -> str:
    """
    Decrypts the input text using the Caesar cipher with the given shift.
    Any integer is accepted and normalized with ``shift % 26``.
    """
    # Reuse encryption with the negative shift for decryption.
    return caesar_encrypt(text, -shift)


# --- 2. Monoalphabetic Substitution ---
def substitution_decrypt(text: str, key: Mapping[str, str]) -> str:
    """
    Applies a fixed substitution key to the text.

    Each letter is looked up by its lowercase form; the replacement keeps the
    case of the input letter. Letters missing from the key, as well as
    spaces and punctuation, are copied unchanged.
    """
    result = []
    for char in text:
        if _is_letter(char) and char.lower() in key:
            plain = key[char.lower()]
            result.append(plain.upper() if char.isupper() else plain.lower())
        else:
            result.append(char)
    return ''.join(result)


# --- 3. Vigenere Cipher (Polyalphabetic) ---
def keyword_shifts(keyword: str):
    """Per-letter shifts of a Vigenere keyword; raises InvalidKey if it has no letters."""
    letters = [ch for ch in keyword if _is_letter(ch)]
    if not letters:
        raise InvalidKey("Keyword must contain alphabetic characters.")
    return [ord(ch) - _base(ch) for ch in letters]


def vigenere_encrypt(plaintext: str, keyword: str) -> str:
    """
    Encrypts the plaintext using the Vigenere cipher.
    The keyword is repeated over the letters of the text only.
    """
    shifts = keyword_shifts(keyword)
    result = []
    key_index = 0
    for char in plaintext:
        if _is_letter(char):
            result.append(caesar_encrypt(char, shifts[key_index % len(shifts)]))
            key_index += 1
        else:
            result.append(char)
    return ''.join(result)


def vigenere_decrypt(ciphertext: str, keyword: str) -> str:
    """
    Decrypts the ciphertext encrypted using the Vigenere cipher.

    The key position only advances on letters, so spaces and punctuation
    never consume a keyword letter. A keyword letter shifts by its distance
    from 'a' or 'A' (its own case). Raises InvalidKey for a keyword without
    letters.
    """
    shifts = keyword_shifts(keyword)
    result = []
    key_index = 0
    for char in ciphertext:
        if _is_letter(char):
            result.append(caesar_decrypt(char, shifts[key_index % len(shifts)]))
            key_index += 1
        else:
            result.append(char)
    return ''.join(result)


# --- 4. "Transposition" (plain reversal) ---
def reverse_text(text: str) -> str:
    """Reverses the character order of the text."""
    return text[::-1]
