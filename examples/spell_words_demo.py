"""Demonstration script for spelling words with element symbols."""
import logging
from pathlib import Path

from pyatomword.parsing.api import get_default_words, load_table, spell_words


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_word_spelling():
    """Demonstrate decomposing words into element symbols."""
    setup_logging()
    table = load_table()
    words = get_default_words() + ["chocolate", "zebra", "Bacon"]
    report = spell_words(words, table)
    print(f"\n{'=' * 80}")
    print(f"ELEMENT TABLE: {len(table)} elements from {table.source}")
    print(f"{'=' * 80}")
    for _, row in report.iterrows():
        print(f"{row['word']:>12} -> {row['sentence']}")
    definable = report[report['definable']]
    print(f"\n{len(definable)} of {len(report)} words spelled")
    print(f"Heaviest word: {definable.loc[definable['total_weight'].idxmax(), 'word']}")
    output_path = Path(__file__).parent / "spell_words_report.csv"
    report.to_csv(output_path, index=False)
    print(f"Report written to {output_path}")


if __name__ == "__main__":
    demonstrate_word_spelling()
