import argparse
import logging
from pathlib import Path
import sys

import imgpack.intern.helper as h
import imgpack.intern.msg as msg
import imgpack.pipeline as pipeline


def main(argv: list[str] = None) -> int:
    """
    Main entry point for the imgpack CLI application.
    Loads the configuration, initializes logging and runs the pipeline once.

    Args:
        argv (list[str], optional): The command line arguments, defaults to sys.argv[1:].

    Returns:
        int: 0 on success, 12 if the run was aborted.
    """
    parser = argparse.ArgumentParser(description='Encode image files as base85 and hash the encoded text')
    parser.add_argument('-c', '--config', help='Toml configuration file path', default=None)
    parser.add_argument('-i', '--input-root', help='directory to scan (default: resources)', default=None)
    parser.add_argument('-o', '--output-root', help='directory for the JSON files (default: out)', default=None)
    parser.add_argument('-e', '--extension', help='extension of the files to process (default: avif)', default=None)
    parser.add_argument('-t', '--traceback', help='print the stack trace of unexpected errors', action='store_true')
    args = parser.parse_args(argv)
    msg.print_exception = args.traceback

    try:
        # Load toml configuration, the default file is optional
        toml_config_file = Path(args.config) if args.config else Path(h.DEFAULT_CONFIG_FILE)
        if args.config or toml_config_file.is_file():
            toml_config = h.load_toml_config(toml_config_file)
        else:
            toml_config_file = None
            toml_config = {}
        settings = h.get_settings(toml_config, {
            "input_root": args.input_root,
            "output_root": args.output_root,
            "extension": args.extension,
        })

        # init logging
        logging.basicConfig(format='%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s',
                            datefmt='%Y-%m-%d %H:%M:%S',
                            filename=settings["log_file"],
                            encoding='utf-8',
                            level=settings["log_level"])
        logger = logging.getLogger(__name__)
        if toml_config_file:
            msg.log(logger.info, {"msg": "CONFIG_LOADED", "path": str(toml_config_file)})

        pipeline.run(settings)
    except Exception as e:
        message_text = msg.get_message_text_for_exception(e)
        msg.print({"msg": "RUN_ABORTED", "message_text": message_text}, prefix_with_error=True)
        return 12
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
