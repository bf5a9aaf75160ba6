import sys
from pathlib import Path

from src.config.logger_config import logger
from src.wiktionary.formatter import render_definition


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: python -m src.wiktionary PAGE.wiki", file=sys.stderr)
        return 2

    path = Path(args[0])
    html = render_definition(path.read_text(encoding="utf-8"))
    if html is None:
        logger.warning("No part-of-speech sections found in {}", str(path))
        return 1
    print(html)
    return 0


# python -m src.wiktionary pages/cat.wiki
if __name__ == "__main__":
    sys.exit(main())
