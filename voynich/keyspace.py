import itertools
import string


def iter_keys(length: int):
    """
    Lazily yields every lowercase string of the given length, in order
    ('aa', 'ab', ..., 'zz' for length 2). Each call starts over.
    """
    if length < 0:
        raise ValueError("Key length must be >= 0")
    for letters in itertools.product(string.ascii_lowercase, repeat=length):
        yield ''.join(letters)
