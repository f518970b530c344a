"""
Command-line entry point - generate a passphrase and copy it to the clipboard
"""

import argparse
import logging
import sys
from typing import List, Optional

from phrasegen.clipboard import copy_then_clear
from phrasegen.config import Settings, get_settings, validate_settings
from phrasegen.entropy import estimate
from phrasegen.errors import GenerationError, InitializationError
from phrasegen.generator import build
from phrasegen.logging_config import setup_logging
from phrasegen.wordlist import load_wordlist

logger = logging.getLogger("phrasegen.main")

SAMPLE_WARNING = (
    "DO NOT USE THIS PASSPHRASE. Most shells log their history in an unencrypted "
    "file. Instead run this program in the standard mode to copy a passphrase "
    "directly to your clipboard."
)

# Command-line destinations and the settings they override
_OVERRIDES = {
    "length": "LENGTH",
    "separator": "SEPARATOR",
    "salt_length": "SALT_LENGTH",
    "salt_chars": "SALT_CHARS",
    "case": "CASE",
    "wait": "WAIT",
    "path": "WORDLIST_PATH",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phrasegen", description="Generate a passphrase.")
    parser.add_argument("-d", "--debug", action="count", default=0,
                        help="Show debugging information; repeat for more detail")
    parser.add_argument("-i", "--info", action="store_true",
                        help="Display a sample passphrase along with information about its security")
    parser.add_argument("-w", "--wait", type=int,
                        help="Seconds to wait before clearing the clipboard, 0 = never (default: 5)")
    parser.add_argument("-l", "--length", type=int,
                        help="Number of words in the passphrase (default: 7)")
    parser.add_argument("-s", "--separator",
                        help="Separator between words (default: space)")
    parser.add_argument("--sl", dest="salt_length", type=int,
                        help="Number of salt characters (default: 1)")
    parser.add_argument("--sc", dest="salt_chars",
                        help="Valid salt characters (default: 0123456789)")
    parser.add_argument("-c", "--case",
                        help="Word case: lowercase|capitalized|uppercase|unchanged "
                             "or 0|1|2|3 (default: capitalized)")
    parser.add_argument("-p", "--path", metavar="FILE",
                        help="Use a custom word list at the given location")
    return parser


def resolve_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Overlay command-line options on the environment settings"""
    base = base if base is not None else get_settings()
    update = {
        field: getattr(args, dest)
        for dest, field in _OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    return base.model_copy(update=update)


def print_info(word_list, settings: Settings) -> None:
    """Print a sample passphrase with its entropy estimate"""
    config = settings.to_passphrase_config()
    sample = build(word_list, config)
    result = estimate(len(word_list), config.length, config.salt_length, len(config.salt_chars))

    print(SAMPLE_WARNING)
    print()
    print(f"Sample: {sample}")
    print(f"Entropy: {result.bits:.2f}")
    print(
        f"This is equivalent to a {result.equivalent_ascii_chars:.2f}-character "
        "password of random ASCII characters"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        settings = resolve_settings(args)
        validate_settings(settings)
    except ValueError as e:
        print(f"[phrasegen] ERROR: {e}", file=sys.stderr)
        return 1

    if args.debug > 0:
        logger.info(
            "Options: length=%d, separator=%r, salt_length=%d, salt_chars=%r, "
            "case=%s, wait=%d, path=%s",
            settings.LENGTH, settings.SEPARATOR, settings.SALT_LENGTH,
            settings.SALT_CHARS, settings.CASE, settings.WAIT, settings.WORDLIST_PATH,
        )

    try:
        if settings.WORDLIST_PATH is not None:
            print(f"Reading word list from {settings.WORDLIST_PATH}...")
        word_list = load_wordlist(settings.WORDLIST_PATH)

        if args.debug > 1:
            for word in word_list[:3]:
                logger.debug("Word list entry: %s", word)

        if args.info:
            print_info(word_list, settings)
        else:
            copy_then_clear(build(word_list, settings.to_passphrase_config()), settings.WAIT)
    except (InitializationError, GenerationError) as e:
        print(f"[phrasegen] ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
