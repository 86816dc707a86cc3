"""Command that obfuscates a plain save file."""

from __future__ import annotations

import argparse

from routewalker.savefile import DEFAULT_SAVE, encrypt


def main(argv=None) -> int:
    """Encrypt the given plain save file into the save file and remove it."""
    parser = argparse.ArgumentParser(description="Encrypt a plain save file.")
    parser.add_argument("path", help="plain save file to encrypt")
    parser.add_argument("-o", "--output", default=DEFAULT_SAVE, help="encrypted file to write")
    args = parser.parse_args(argv)
    encrypt(args.path, args.output)
    return 0