"""Caesar shift cipher over the ASCII letters."""

from __future__ import annotations

import argparse
import string
from collections.abc import Sequence

ALPHABET_SIZE = 26
MAX_SHIFT = 255
DEMO_PLAINTEXT = "the quick brown fox jumps over the lazy dog"


def _shift_char(char: str, shift: int) -> str:
    if char in string.ascii_lowercase:
        base = ord("a")
    elif char in string.ascii_uppercase:
        base = ord("A")
    else:
        return char
    return chr(base + (ord(char) - base + shift) % ALPHABET_SIZE)


def encrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter forward by ``shift``; other characters pass through."""
    if not 0 <= shift <= MAX_SHIFT:
        raise ValueError(f"shift must be between 0 and {MAX_SHIFT}, got {shift}")
    return "".join(_shift_char(char, shift) for char in text)


def decrypt(text: str, shift: int) -> str:
    """Undo :func:`encrypt` for a shift between 0 and 26."""
    if not 0 <= shift <= ALPHABET_SIZE:
        raise ValueError(f"shift must be between 0 and {ALPHABET_SIZE}, got {shift}")
    return encrypt(text, ALPHABET_SIZE - shift)


def demo() -> tuple[str, str, str]:
    """Encrypt and decrypt a pangram with shift 3, print and return the three texts."""
    shift = 3
    ciphertext = encrypt(DEMO_PLAINTEXT, shift)
    decrypted = decrypt(ciphertext, shift)
    print(f"Plaintext: {DEMO_PLAINTEXT}")
    print(f"Ciphertext: {ciphertext}")
    print(f"Decrypted text: {decrypted}")
    return DEMO_PLAINTEXT, ciphertext, decrypted


def _byte(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid shift: {value!r}") from None
    if not 0 <= number <= MAX_SHIFT:
        raise argparse.ArgumentTypeError(f"shift out of range: {value!r}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encrypt and decrypt messages using the Caesar cipher"
    )
    parser.add_argument("-e", "--encrypt", action="store_true", help="Encrypt the message")
    parser.add_argument("-d", "--decrypt", action="store_true", help="Decrypt the message")
    parser.add_argument(
        "-m", "--message", required=True, help="The message to encrypt or decrypt"
    )
    parser.add_argument(
        "-s",
        "--shift",
        type=_byte,
        default=3,
        help="The shift to use for the cipher, between 1 and 25 (default 3)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.encrypt:
            print(encrypt(args.message, args.shift))
        elif args.decrypt:
            print(decrypt(args.message, args.shift))
        else:
            print("Please specify either --encrypt or --decrypt")
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())