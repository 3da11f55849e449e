#!/usr/bin/env python3
"""
Moy Sekret - per-profile file encryption

A profile binds a name to a Curve25519 key pair and a storage directory.
Files are sealed with NaCl crypto_box (XSalsa20-Poly1305) using the profile's
own public and secret key on both ends of the box.

Layout:
  ~/.moy-sekret.<profile>.json   # profile record (name + absolute storage dir)
  <storage>/
    <profile>.pk                 # base64 public key (32 bytes)
    <profile>.sk                 # base64 secret key (32 bytes), mode 0600
    <file>.cz                    # u64 nonce len | nonce(24) | u64 ct len | MAC(16) || ct

Commands:
  init       Create a profile and its key pair
  encrypt    Seal a file into the profile's storage directory as <name>.cz
  decrypt    Open a .cz file into a destination directory

Set MOY_SEKRET_HOME to keep profile records somewhere other than $HOME.
"""
from __future__ import annotations

import logging
import sys

from moysekret.ui.cli import build_parser
from moysekret.ui.constants import EXIT_FAILURE
from moysekret.utils.errors import SekretError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        return args.func(args)
    except SekretError as e:
        print(f"[!] Something went really bad here: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
