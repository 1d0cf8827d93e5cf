import logging
import sys
from argparse import ArgumentParser

from words_statistics import client
from words_statistics.config import load_settings
from words_statistics.wordcount import count_file, format_statistics

logger = logging.getLogger(__name__)

DEFAULT_TOP = 10


def plot_top_words(snapshot, output_path: str, top: int = 20):
    """Save a bar chart of the most frequent words"""
    entries = snapshot[:top]
    if not entries:
        raise ValueError("No words to plot")

    import matplotlib.pyplot as plt
    import numpy as np

    counts = [count for count, _ in entries]
    words = [word for _, word in entries]
    x = np.arange(len(words))

    fig, ax = plt.subplots()
    ax.bar(x, counts, 0.6, label="Occurrences")
    ax.set_ylabel('Occurrences')
    ax.set_title(f'Top {len(words)} words')
    ax.set_xticks(x)
    ax.set_xticklabels(words, rotation=45, ha='right')
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_path)
    plt.close(fig)
    logger.info(f"Saved plot to {output_path}")


def count_file_remotely(file_path: str, base_url: str, top: int):
    """Send the file to a running service and return its top statistics"""
    logger.info(f"Sending {file_path} to {base_url}")
    client.wait_until_healthy(base_url)
    with open(file_path, "r", encoding="utf-8") as f:
        words_added = client.add_lines(base_url, f.read().splitlines())
    logger.info(f"Service counted {words_added} words")
    return client.get_statistics(base_url, limit=top)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Count word frequencies in a text file")
    parser.add_argument("file", help="text file to count")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP, help="number of entries to print")
    parser.add_argument("--plot", help="save a bar chart of the top words to this PNG file")
    parser.add_argument("--remote", action="store_true", help="count with a running words statistics service")
    parser.add_argument("--config", help="JSON file holding the service_url used with --remote")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=load_settings().log_level)
    if args.top < 0:
        logger.error("--top must be non-negative")
        return 2

    if args.remote:
        base_url = client.resolve_service_url(args.config)
        snapshot = count_file_remotely(args.file, base_url, args.top)
    else:
        snapshot, execution_time = count_file(args.file)
        logger.info(f"Execution time: {execution_time:.2f} ms")

    for line in format_statistics(snapshot, args.top):
        print(line)

    if args.plot:
        try:
            plot_top_words(snapshot, args.plot, top=args.top)
        except ValueError as e:
            logger.error(f"Cannot plot {args.file}: {e}")
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
