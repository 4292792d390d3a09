"""Entry point: print the rule view of a game manual.

Usage: python run.py MANUAL_JSON [QUERY...]
"""

import logging
import sys

from rulebook.config import load_config
from rulebook.manual.loader import ManualLoader
from rulebook.markup.renderer import flatten_segments, parse_rule_text
from rulebook.search.ordering import group_display_name
from rulebook.search.view import build_rule_view

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Load a manual and print its groups and rules, ranked by an optional query."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        return 2

    config = load_config()
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    loader = ManualLoader(config.storage.manuals_dir)
    try:
        manual = loader.load_file(args[0])
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load game manual: %s", e)
        return 1
    query = " ".join(args[1:])

    groups = build_rule_view(manual, manual.program, query, config=config)
    for group in groups:
        print(f"== {group_display_name(group.name, config.groups.display_names)}")
        for rule in group.rules:
            print(f"{rule.code} {rule.title}")
            if query:
                segments = parse_rule_text(
                    rule.body,
                    manual=manual,
                    link_base_url=config.markup.link_base_url,
                )
                print("    " + flatten_segments(segments).replace("\n", "\n    "))
    return 0


if __name__ == "__main__":
    sys.exit(main())
