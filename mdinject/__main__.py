"""CLI entry point: cat foo.txt | python -m mdinject [OPTIONS] FILE"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from mdinject.errors import MdInjectError, UsageError
from mdinject.models import DEFAULT_TAG_ID, DEFAULT_TEMPLATE, InjectConfig, RunOutcome, RunResult

logger = logging.getLogger(__name__)

_EPILOG = """\
examples:
  $ cat foo.txt | md-inject README.md
  $ ./foo --help 2>&1 | md-inject --template='<pre>{{ stdin | trim }}</pre>' readme.md
  $ ./foo --help 2>&1 | md-inject --template-file=codeblock.j2 readme.md
  $ ls -1 | md-inject --fail-on-diff readme.md

exit codes:
  0  success, nothing to do, or --print-only
  1  usage, I/O, template or injection error
  2  --fail-on-diff and the file is out of date
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="md-inject",
        description="Inject text from stdin into markdown files and keep it up to date.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", metavar="FILE", help="Target file to inject text into, e.g. README.md")
    parser.add_argument("--id", default=None,
                        help=f"Identifier for the tags to inject content between (default: {DEFAULT_TAG_ID})")
    parser.add_argument("--fail-on-diff", action="store_true", default=None,
                        help="Exit with code 2 if the file would be changed, without touching it")
    parser.add_argument("--print-only", action="store_true", default=None,
                        help="Print the final output to stdout instead of writing the file")
    template_group = parser.add_mutually_exclusive_group()
    template_group.add_argument("--template", default=None,
                                help="Jinja2 template applied to stdin before injecting, "
                                     f"stdin is bound to 'stdin' (default: {DEFAULT_TEMPLATE!r})")
    template_group.add_argument("--template-file", default=None,
                                help="Read the Jinja2 template from a file")
    parser.add_argument("--config", default=None,
                        help="Path to YAML file with defaults for these options")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def resolve_config(args: argparse.Namespace) -> InjectConfig:
    """Build the run config: defaults <- YAML <- CLI flags."""
    from mdinject.template_engine import read_template_file

    settings = {}
    if args.config:
        from mdinject.settings import load_settings
        settings = load_settings(args.config)

    def pick(name: str, default):
        value = getattr(args, name)
        if value is not None:
            return value
        return settings.get(name, default)

    if args.template is not None:
        template = args.template
    elif args.template_file is not None:
        template = read_template_file(args.template_file)
    elif "template_file" in settings:
        template = read_template_file(settings["template_file"])
    else:
        template = settings.get("template", DEFAULT_TEMPLATE)

    return InjectConfig(
        filename=args.file,
        id=pick("id", DEFAULT_TAG_ID),
        fail_on_diff=pick("fail_on_diff", False),
        print_only=pick("print_only", False),
        template=template,
    )


def parse_args(argv: list[str]) -> InjectConfig:
    """Turn an argument list into an InjectConfig, raising UsageError on bad input."""
    return resolve_config(build_parser().parse_args(argv))


def _report(result: RunResult) -> None:
    from rich.console import Console
    from rich.markup import escape

    console = Console()
    name = escape(result.filename)
    if result.outcome is RunOutcome.UNCHANGED:
        console.print(f"No content change needed for [bold]{name}[/bold], nothing to do!", soft_wrap=True)
    elif result.outcome is RunOutcome.OUT_OF_DATE:
        print(f"{result.filename} would be changed. The file is out of date.", file=sys.stderr)
    elif result.outcome is RunOutcome.PRINTED:
        sys.stdout.write(result.content)
        sys.stdout.flush()
    else:
        console.print(f"[bold]{name}[/bold] successfully updated!", soft_wrap=True)


def main(argv: Optional[list[str]] = None) -> None:
    from mdinject.orchestrator import read_stdin, run

    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}\n", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args)
        result = run(config, read_stdin())
    except MdInjectError as exc:
        logger.debug("md-inject failed while %s", exc.stage, exc_info=True)
        print(f"Error {exc.stage}: {exc}", file=sys.stderr)
        sys.exit(1)

    _report(result)
    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
