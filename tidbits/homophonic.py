"""A toy homophonic substitution cipher."""

from __future__ import annotations

import argparse
import random
import string
from collections.abc import Sequence

DEMO_PLAINTEXT = "the quick brown fox jumps over the lazy dog"


def generate_mapping(rng: random.Random | None = None) -> dict[str, list[str]]:
    """Give every lowercase letter two or three random lowercase homophones."""
    if rng is None:
        rng = random.Random()
    return {
        letter: [rng.choice(string.ascii_lowercase) for _ in range(rng.randint(2, 3))]
        for letter in string.ascii_lowercase
    }


def homophonic_cipher(
    plaintext: str, rng: random.Random | None = None
) -> tuple[str, dict[str, list[str]]]:
    """Encrypt ``plaintext`` with a fresh random mapping.

    Letters are lowercased and replaced by one of their homophones chosen at
    random; every other character is dropped. Returns the ciphertext and the
    mapping used.
    """
    if rng is None:
        rng = random.Random()
    mapping = generate_mapping(rng)
    pieces = []
    for char in plaintext:
        lowered = char.lower()[:1]
        homophones = mapping.get(lowered)
        if homophones:
            pieces.append(rng.choice(homophones))
    return "".join(pieces), mapping


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt a pangram and print the plaintext, ciphertext and mapping."""
    argparse.ArgumentParser(description="Homophonic cipher demonstration").parse_args(argv)
    ciphertext, mapping = homophonic_cipher(DEMO_PLAINTEXT)
    print(f"Plaintext: {DEMO_PLAINTEXT}")
    print(f"Ciphertext: {ciphertext}")
    print(f"Mapping: {mapping}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())