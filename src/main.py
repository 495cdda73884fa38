import argparse
import logging
import os
import sys
from pathlib import Path

from catalog import CatalogConfig
from htmlgen.builder import CatalogPageBuilder, category_from_query
from htmlgen.constants import CATEGORY_TITLES
from utils import setup_logging

# File paths
CONFIG_FILE = "catalog.conf"
LOG_FILE = "catalog.log"
OUTPUT_FILE = "collection.html"


def load_config(args):
    if args.config or Path(CONFIG_FILE).exists():
        config = CatalogConfig.from_config_file(args.config or CONFIG_FILE)
    else:
        config = CatalogConfig.from_env()
    if args.csv_url:
        config.csv_url = args.csv_url
    return config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render catalog category pages from a published CSV feed")
    parser.add_argument("--cat", help="Category to render (defaults to the configured category)")
    parser.add_argument("--query", help='Page query string, e.g. "?cat=chair"')
    parser.add_argument("--all", action="store_true", help="Render one page per known category")
    parser.add_argument("--output", default=OUTPUT_FILE, help="Output file for a single page")
    parser.add_argument("--output-dir", default=".", help="Output directory when using --all")
    parser.add_argument("--template", help="HTML page shell containing #product-grid")
    parser.add_argument("--csv-url", help="Published CSV URL (overrides config)")
    parser.add_argument("--config", help=f"Config file (default: {CONFIG_FILE} if present)")
    parser.add_argument("--log-file", default=LOG_FILE, help="Log file path")
    return parser.parse_args(argv)


def write_page(path, html):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    logging.info(f"Wrote {path}")


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file)
    if args.config and not Path(args.config).exists():
        logging.error(f"Config file not found: {args.config}")
        return 1
    config = load_config(args)
    logging.info(f"Using {config!r}")

    template_html = None
    if args.template:
        if not Path(args.template).exists():
            logging.error(f"Template not found: {args.template}")
            return 1
        template_html = Path(args.template).read_text(encoding="utf-8")

    builder = CatalogPageBuilder(config, template_html)
    if args.all:
        for category in CATEGORY_TITLES:
            write_page(os.path.join(args.output_dir, f"{category}.html"), builder.build(category))
        return 0

    category = args.cat or category_from_query(args.query, config.default_category)
    write_page(args.output, builder.build(category))
    return 0


if __name__ == "__main__":
    sys.exit(main())
