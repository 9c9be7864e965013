import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils.config import Config
from crawler import Crawler


def print_summary(crawler, top_n: int, out=sys.stdout):
    """Visited URLs, then the most common words when the tally is on."""
    out.write("\n=============\n     done!   \n=============\n\n")
    out.write("visited:\n")
    for url in crawler.visited():
        out.write(f"{url}\n")

    if crawler.word_tally is not None:
        out.write(f"\n{top_n} most common words:\n")
        for word, freq in crawler.top_words(top_n):
            out.write(f"   {word:<15} {freq:,}\n")


def main(config_file: str, seed_url: str | None = None) -> int:
    """Read config, crawl to completion, report."""

    # 1) load configuration (a missing file just means defaults)
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)
    if seed_url:
        config.seed_url = seed_url

    # 2) spin up crawler instance (a malformed seed raises here)
    crawler = Crawler(config)

    # 3) run crawl loop (blocks until the frontier is quiescent)
    crawler.start()

    print_summary(crawler, config.top_words)
    return 0


def cli() -> int:
    parser = ArgumentParser(description="Breadth-first multithreaded web crawler")
    parser.add_argument(
        "seed_url",
        nargs="?",
        default=None,
        help="URL to start from (default: SEEDURL from the config file)",
    )
    parser.add_argument(
        "--config_file",
        type=str,
        default="config.ini",
        help="Path to config.ini",
    )
    opts = parser.parse_args()
    return main(opts.config_file, opts.seed_url)


if __name__ == "__main__":
    sys.exit(cli())
