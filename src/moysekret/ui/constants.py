"""Shared terminal constants for the command line interface."""

# ANSI styling
MESSAGE_COLORS = {
    "alert": "\033[31m",    # Red
    "success": "\033[32m",  # Green
}
RESET = "\033[0m"

EXIT_OK = 0
EXIT_FAILURE = 1

CONFIRM_PROMPT = "Are you sure about that? [y/N] "
CONFIRM_DECLINED = "Okay. Safe move."

INIT_OVERRIDE_WARNING = (
    "This operation will {OVERRIDE} any key you have got with this profile.\n"
    "This is {UNRECOVERABLE} and you may lose access to any file you have encrypted with those keys."
)
ENCRYPT_OVERRIDE_WARNING = (
    "This operation will {OVERRIDE} the existing encrypted file.\n"
    "This is {UNRECOVERABLE}, please be sure what you are about to do."
)
DECRYPT_OVERRIDE_WARNING = (
    "This operation will {OVERRIDE} the existing plain file.\n"
    "This is {UNRECOVERABLE}, please be sure what you are about to do."
)
