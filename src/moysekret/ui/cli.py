import argparse
import sys

from moysekret import __version__
from moysekret.ui.constants import (
    CONFIRM_DECLINED,
    CONFIRM_PROMPT,
    DECRYPT_OVERRIDE_WARNING,
    ENCRYPT_OVERRIDE_WARNING,
    EXIT_OK,
    INIT_OVERRIDE_WARNING,
    MESSAGE_COLORS,
    RESET,
)
from moysekret.utils.core import decrypt, encrypt, init
from moysekret.utils.dataModels import DEFAULT_DEST_DIR


def paint(text: str, kind: str) -> str:
    if not sys.stdout.isatty():
        return text
    return f"{MESSAGE_COLORS[kind]}{text}{RESET}"


def red(text: str) -> str:
    return paint(text, "alert")


def success(message: str) -> None:
    print(paint(f"[+] {message}", "success"))


def confirm_override(warning: str) -> bool:
    print(warning.format(OVERRIDE=red("override"), UNRECOVERABLE=red("unrecoverable")))
    try:
        answer = input(CONFIRM_PROMPT)
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def cmd_init(args: argparse.Namespace) -> int:
    if args.override and not confirm_override(INIT_OVERRIDE_WARNING):
        print(CONFIRM_DECLINED)
        return EXIT_OK
    profile = init(args.profile, args.dir, args.override)
    success(f"Key pair created with success at {profile.storage} directory")
    return EXIT_OK


def cmd_encrypt(args: argparse.Namespace) -> int:
    if args.override and not confirm_override(ENCRYPT_OVERRIDE_WARNING):
        print(CONFIRM_DECLINED)
        return EXIT_OK
    target = encrypt(args.profile, args.file, args.override)
    success(f"Encryption succesfully done -> {target}")
    return EXIT_OK


def cmd_decrypt(args: argparse.Namespace) -> int:
    if args.override and not confirm_override(DECRYPT_OVERRIDE_WARNING):
        print(CONFIRM_DECLINED)
        return EXIT_OK
    target = decrypt(args.profile, args.file, args.dest, args.override)
    success(f"Decryption succesfully done -> {target}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="moy-sekret", description="You know, that is kind of... secret.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Log what is being done")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Initialize the app for a given profile")
    p_init.add_argument("-p", "--profile", required=True, help="Name of the profile")
    p_init.add_argument("-d", "--dir", required=True, help="Target directory where to store keys and encrypted files")
    p_init.add_argument("-o", "--override", action="store_true", help="Override existing profile and keys")
    p_init.set_defaults(func=cmd_init)

    p_enc = sub.add_parser("encrypt", help="Encrypt a file into the profile's storage directory, keeping the original")
    p_enc.add_argument("-p", "--profile", required=True, help="Name of the profile")
    p_enc.add_argument("-f", "--file", required=True, help="Path to the source file to be encrypted")
    p_enc.add_argument("-o", "--override", action="store_true", help="Override existing encrypted file")
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt a .cz file into a target directory, keeping the encrypted one")
    p_dec.add_argument("-p", "--profile", required=True, help="Name of the profile")
    p_dec.add_argument("-f", "--file", required=True, help="Path to the source file to be decrypted")
    p_dec.add_argument("-d", "--dest", default=DEFAULT_DEST_DIR, help="Target directory where to save the decrypted file")
    p_dec.add_argument("-o", "--override", action="store_true", help="Override existing plain file")
    p_dec.set_defaults(func=cmd_decrypt)

    return p
