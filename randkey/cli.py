import argparse
import sys
import toml
from pathlib import Path
from .config import Config
from .composer import Composer, ComposerException
from .shell import Shell
from .busy_spinner import BusySpinner

# Outputs longer than this get a spinner on stderr while generating.
SPINNER_THRESHOLD = 1_000_000

def load_config(toml_fn):
    """
    Returns the Config stored in toml_fn, or the default Config if the file
    does not exist.
    """
    try:
        with open(toml_fn, "r") as f:
            config_dict = toml.load(f)
    except FileNotFoundError:
        return Config.default()

    return Config(config_dict)

def generate_and_print(composer: Composer):
    if composer.total > SPINNER_THRESHOLD and sys.stderr.isatty():
        with BusySpinner(f"Generating {composer.total} characters"):
            composer.generate()
    else:
        composer.generate()
    print(composer)

def main_gen(args, config):
    counts = args.counts
    if len(counts) == 0:
        composer = config.composer()
    elif len(counts) in (3, 4):
        unit = counts[3] if len(counts) == 4 else config.unit
        composer = Composer(counts[0], counts[1], counts[2], unit=unit)
    else:
        args.parser.error("expected: letters symbols numbers [unit]")
    generate_and_print(composer)

def main_rejoin(args, config):
    unit = args.unit if args.unit is not None else config.unit
    composer = Composer.from_string(args.text, unit=unit)
    generate_and_print(composer)

def main_shell(args, config):
    Shell(config.composer()).run()

def default_config_fn():
    fn = Path.home() / ".local/share/randkey/config.toml"
    return str(fn)

def main(argv=None):
    ap = argparse.ArgumentParser(prog="randkey")
    ap.add_argument("--config", dest="config_toml",
        help="Configuration file",
        default=default_config_fn())
    ap.set_defaults(action=main_gen, counts=[], parser=ap)

    subparsers = ap.add_subparsers(title="Commands")

    parser_gen = subparsers.add_parser("gen",
        help="Generate a random string of the given composition")
    parser_gen.add_argument("counts", nargs="*", metavar="count",
        help="letters symbols numbers [unit]")
    parser_gen.set_defaults(action=main_gen, parser=parser_gen)

    parser_rejoin = subparsers.add_parser("rejoin",
        help="Generate a random string of the same composition as TEXT")
    parser_rejoin.add_argument("text", help="ASCII string to take the composition from")
    parser_rejoin.add_argument("--unit", help="Characters generated per batch")
    parser_rejoin.set_defaults(action=main_rejoin)

    parser_shell = subparsers.add_parser("shell",
        help="Edit a composition interactively")
    parser_shell.set_defaults(action=main_shell)

    args = ap.parse_args(argv)

    try:
        config = load_config(args.config_toml)
        args.action(args, config)
    except ComposerException as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except toml.TomlDecodeError as exc:
        print(f"Error: {args.config_toml}: {exc}", file=sys.stderr)
        return 1
    return 0
