import argparse
import logging
import os
import sys

from PySubDraft.Options import Options
from PySubDraft.Substitutions import Substitutions
from PySubDraft.SubtitleError import InputNotFoundError, SubtitleError

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INPUT_NOT_FOUND = 2

def InitLogger(logfile_name : str, debug : bool = False) -> None:
    """
    Log to the console and to a file in the working directory
    """
    log_level = logging.DEBUG if debug or os.getenv('DEBUG_MODE') == "Yes" else logging.INFO

    logging.basicConfig(format='%(levelname)s: %(message)s', level=log_level)

    logfile = os.path.join(os.getcwd(), f"{logfile_name}.log")
    file_handler = logging.FileHandler(logfile, encoding='utf-8', mode='w')
    file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logging.getLogger('').addHandler(file_handler)

def CreateArgParser(description : str) -> argparse.ArgumentParser:
    """
    Arguments shared by all the scripts
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument('input', help="Input file path")
    parser.add_argument('-o', '--output', help="Output file path")
    parser.add_argument('--gap', type=float, default=None, help="Seconds of extra gap to insert between consecutive subtitles")
    parser.add_argument('--substitution', action='append', type=str, default=None, help="Text substitution in the form \"before::after\". Can be repeated.")
    parser.add_argument('--substitutions', type=str, default=None, help="JSON file with a map of text substitutions")
    parser.add_argument('--encoding', type=str, default=None, help="Encoding of the input and output files")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def CreateOptions(args : argparse.Namespace, **settings) -> Options:
    """
    Build options from the command line arguments
    """
    substitutions = Substitutions()
    if args.substitutions:
        substitutions = Substitutions.LoadFile(args.substitutions)
    if args.substitution:
        substitutions.Update(Substitutions.Parse(args.substitution).substitutions)

    return Options({
        'gap_seconds': args.gap,
        'substitutions': substitutions if substitutions else None,
        'encoding': args.encoding,
        **settings
    })

def RunAndExit(action, *args) -> None:
    """
    Run a conversion (including building its options) and exit with a code that distinguishes a missing input from other failures
    """
    try:
        result = action(*args)
        logging.info(f"Wrote {result}")
        sys.exit(EXIT_SUCCESS)

    except InputNotFoundError as e:
        logging.error(f"Error: {e}")
        sys.exit(EXIT_INPUT_NOT_FOUND)

    except (SubtitleError, ValueError) as e:
        logging.error(f"Error: {e}")
        sys.exit(EXIT_FAILURE)
