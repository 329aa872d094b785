"""Print sample encodings from a freshly built tokenizer."""

from __future__ import annotations

import argparse

from wordtok.tokenizer import Tokenizer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show word tokenizer encodings.")
    parser.add_argument(
        "--text",
        action="append",
        default=None,
        help="Text to encode and decode (repeatable).",
    )
    parser.add_argument("--add", default="custom", help="Word to add to the vocabulary.")
    return parser.parse_args()


def show(tokenizer: Tokenizer, text: str, label: str = "Encoded") -> None:
    tokens = tokenizer.encode(text)
    print(f"{label}:", tokens)
    print("Decoded:", tokenizer.decode(tokens))


def main() -> None:
    args = parse_args()
    tokenizer = Tokenizer()

    print("=== Basic Tokenizer Demo ===")
    for text in args.text or ["hello world", "this is a test"]:
        show(tokenizer, text)
        print()

    print("Vocabulary size:", tokenizer.get_vocabulary_size())

    tokenizer.add_token(args.add)
    print(f"Added {args.add!r} token")
    print("New vocabulary size:", tokenizer.get_vocabulary_size())

    print()
    show(tokenizer, f"hello {args.add} world", label=f"Encoded with {args.add} token")


if __name__ == "__main__":
    main()
