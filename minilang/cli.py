"""
MiniLang command line tool.

    mlc program.ml                 # tokens and tree as JSON
    mlc --no-tokens program.ml     # tree only
    echo "let x = 1;" | mlc        # read from stdin

Exit status is 0 when the input is valid and 1 on a lexical or syntax
error, whose message goes to stderr.

Author: xwest
"""

import json
import logging
import sys

import click

from . import __version__
from .pipeline import analyze

logger = logging.getLogger("minilang")


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--tokens/--no-tokens", default=True, help="Print the token list.")
@click.option("--tree/--no-tree", default=True, help="Print the syntax tree.")
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True,
              help="JSON indentation; 0 puts one value per line with no indent.")
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline progress to stderr.")
@click.version_option(__version__, prog_name="mlc")
def main(source, tokens, tree, indent, verbose):
    """Tokenize and parse a MiniLang SOURCE file (default: stdin)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Wrapped stdin streams may not carry a name
    filename = getattr(source, "name", None) or "<stdin>"
    try:
        text = source.read()
    except UnicodeDecodeError as e:
        click.echo(f"Cannot read {filename}: not valid UTF-8 ({e.reason})", err=True)
        sys.exit(1)
    logger.debug("Read %d characters from %s", len(text), filename)

    result = analyze(text, filename)
    if not result.ok:
        logger.debug("Analysis failed with %s", result.error.code)
        click.echo(result.message, err=True)
        sys.exit(1)

    logger.debug("Produced %d tokens and %d top-level declarations",
                 len(result.tokens), len(result.tree.declarations))

    output = {}
    if tokens:
        output["tokens"] = [token.to_dict() for token in result.tokens]
    if tree:
        output["tree"] = result.tree.to_dict()

    click.echo(json.dumps(output, indent=indent, ensure_ascii=False))


if __name__ == "__main__":
    main()
