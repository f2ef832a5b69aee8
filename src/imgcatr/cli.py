import argparse
import logging
import sys
from importlib.metadata import version

from imgcatr.errors import ImgcatrError
from imgcatr.options import CLI_MODES, OutputMode, RenderConfig, parse_size
from imgcatr.renderer import Renderer

__version__ = version("imgcatr")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imgcatr", description="Display an image in the terminal")
    parser.add_argument("image", metavar="IMAGE", help="Image file to display")
    parser.add_argument(
        "-s", "--size", metavar="NxM", default=None, help="Image size to display (default: terminal size)"
    )
    parser.add_argument(
        "-f", "--force", action="store_true", default=False, help="Don't preserve the image's aspect ratio"
    )
    parser.add_argument("-a", "--ansi", metavar="MODE", choices=CLI_MODES, help="Force output ANSI escape format")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: list[str] | None = None, renderer: Renderer | None = None, out=None) -> int:
    """Run the command line tool, returning the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    out = out if out is not None else sys.stdout
    renderer = renderer if renderer is not None else Renderer()

    try:
        config = RenderConfig(
            size=parse_size(args.size) if args.size is not None else None,
            preserve_aspect=not args.force,
            mode=OutputMode(args.ansi) if args.ansi is not None else None,
        )
        renderer.render_file(args.image, config, out)
    except ImgcatrError as e:
        logger.debug("Aborting", exc_info=True)
        e.print_error(sys.stderr)
        return e.exit_code
    out.flush()
    return 0


def main():
    sys.exit(run())
