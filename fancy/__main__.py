import sys
import argparse
from pathlib import Path
from . import __version__
from .utils import markups as mu
from .utils import config as cfg
from .printers import colorize
from .main.settings import FancySettings, default_config_path
from .main.loggers import Logger


def make_parser():
    parser = argparse.ArgumentParser(
        prog="fancy",
        description="Print TEXT with its color markup translated into ANSI escape"
        " sequences. Without TEXT, each line of the standard input is translated.",
    )
    parser.add_argument(
        "-n",
        dest="newline",
        action="store_const",
        const=False,
        help="do not append a newline",
    )
    parser.add_argument(
        "-e",
        dest="stderr",
        action="store_true",
        help="print to the standard error",
    )
    parser.add_argument(
        "-s",
        dest="source",
        action="store_true",
        help="treat TEXT as source text and print the python expression",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="read settings from PATH",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"fancy {__version__}",
    )
    parser.add_argument("text", metavar="TEXT", nargs="?", help="the markup to print")
    parser.add_argument("args", metavar="ARGS", nargs="*", help="values formatted into TEXT")
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    logger = Logger()

    try:
        settings = FancySettings.read(args.config or default_config_path())
    except cfg.DecodeError as e:
        logger.error(f"invalid settings: {e}")
        return 1
    logger = Logger(settings.logger)

    newline = settings.newline if args.newline is None else args.newline
    end = "\n" if newline else ""
    file = sys.stderr if args.stderr else sys.stdout

    try:
        if args.source:
            if args.text is None:
                logger.error("missing source text")
                return 2
            source = " ".join([args.text, *args.args])
            res = mu.colorize_source(source, quotes=settings.markup.quotes)
            print(res.to_source(), end=end, file=file)

        elif args.text is not None:
            print(colorize(args.text, *args.args), end=end, file=file)

        else:
            for line in sys.stdin:
                print(colorize(line.rstrip("\n")), end=end, file=file, flush=True)

    except mu.MarkupParseError as e:
        logger.report(e)
        return 1

    except (IndexError, KeyError, ValueError) as e:
        logger.error(f"cannot format {logger.emph(args.text)}: {e!r}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
