"""Shared console style constants for the filecrypt CLI."""
from colorama import Fore, Style

TEXT_STYLES = {
    "base": Fore.WHITE,
    "success": Fore.GREEN + Style.BRIGHT,
    "error": Fore.RED + Style.BRIGHT,
    "title": Fore.CYAN + Style.BRIGHT,
    "subtitle": Fore.CYAN + Style.DIM,
    "label": Fore.WHITE,
}

RESET = Style.RESET_ALL

USAGE_LINES = [
    ("generate-key [-m description] <id>", "Create a new key"),
    ("encrypt <file> <id>", "Encrypt a file"),
    ("decrypt <file> <id>", "Decrypt a file"),
    ("list-key", "Show all keys"),
]
