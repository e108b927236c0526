# ruletok/__main__.py

"""
Command-line harness for the ruletok tokenizers.

Runs one or all of the tokenizers over a text argument, one or more input
files, or (with no input) the built-in sample sentence, and prints the tokens.

    python -m ruletok
    python -m ruletok "The cat sat on the mat" --mode comprehensive --filter
    python -m ruletok --mode codes --input-file notes.txt --json

This work is licensed under the Creative Commons Attribution-ShareAlike 4.0 International License.
To view a copy of this license, visit http://creativecommons.org/licenses/by-sa/4.0/
or send a letter to Creative Commons, PO Box 1866, Mountain View, CA 94042, USA.

Original Author: Michael Morgan
Date: 2025-11-24
Github: https://github.com/Mmorgan-ML
Email: mmorgankorea@gmail.com
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import TokenizerConfig
from .errors import TokenizerError
from .pre_tokenizers import char_codes, regex_tokenize, split_on_spaces
from .tokenizer import RuleBasedTokenizer

logger = logging.getLogger("ruletok")

SAMPLE_TEXT = "The 1st player's score is 100-50, and he said, 'I'm ready!'"
MODES = ("simple", "advanced", "comprehensive", "codes", "all")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ruletok", description="Tokenize text with configurable rules.")
    parser.add_argument("--mode", choices=MODES, default="all", help="Tokenizer to run (default: all).")
    parser.add_argument("text", nargs="?", default=None, help="Text to tokenize. Defaults to a sample sentence.")
    parser.add_argument("--input-file", action="append", default=[], type=Path,
                        help="Tokenize the contents of this file. May be repeated.")
    parser.add_argument("--filter", action="store_true", help="Remove stop words (comprehensive mode).")
    parser.add_argument("--stop-words-file", type=Path, default=None,
                        help="File with one stop word per line, replacing the default list.")
    parser.add_argument("--config-dir", type=str, default=None,
                        help="Directory holding a saved tokenizer_config.json.")
    parser.add_argument("--json", action="store_true", help="Print results as JSON.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    return parser.parse_args(argv)


def build_tokenizer(args: argparse.Namespace) -> RuleBasedTokenizer:
    """Builds the comprehensive tokenizer from a saved config and/or command-line overrides."""
    config = TokenizerConfig.from_pretrained(args.config_dir) if args.config_dir else TokenizerConfig()
    overrides = {}
    if args.stop_words_file is not None:
        with open(args.stop_words_file, 'r', encoding='utf-8') as f:
            overrides["stop_words"] = [line.strip() for line in f if line.strip()]
        logger.info(f"Loaded {len(overrides['stop_words'])} stop words from {args.stop_words_file}")
    if args.filter:
        overrides["should_filter"] = True
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return RuleBasedTokenizer(config)


def run_mode(mode: str, text: str, tokenizer: RuleBasedTokenizer):
    if mode == "simple":
        return split_on_spaces(text)
    if mode == "advanced":
        return regex_tokenize(text)
    if mode == "comprehensive":
        return tokenizer.tokenize(text)
    if mode == "codes":
        return char_codes(text)
    raise ValueError(f"Unknown mode: {mode}")


def print_result(label: str, mode: str, result, as_json: bool):
    if as_json:
        print(json.dumps({"source": label, "mode": mode, "tokens": result}, ensure_ascii=False))
        return
    print("=================================================")
    print(f"{mode.capitalize()} Tokenizer Output ({label})")
    print("=================================================")
    print("Tokens: ", result)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        tokenizer = build_tokenizer(args)
    except (TokenizerError, EnvironmentError) as e:
        logger.error(f"Could not build tokenizer: {e}")
        return 1

    # --- Gather inputs ---
    sources = []
    if args.text is not None:
        sources.append(("argument", args.text))
    for file_path in tqdm(args.input_file, desc="Reading", unit="file", disable=len(args.input_file) < 2):
        try:
            sources.append((file_path.name, file_path.read_text(encoding="utf-8")))
        except OSError as e:
            logger.error(f"Error reading {file_path}: {e}")
            return 1
    if not sources:
        sources.append(("sample", SAMPLE_TEXT))

    modes = [m for m in MODES if m != "all"] if args.mode == "all" else [args.mode]
    for label, text in sources:
        for mode in modes:
            print_result(label, mode, run_mode(mode, text, tokenizer), args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
