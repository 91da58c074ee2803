import getopt
import os
import sys
from pathlib import Path

from babel.messages.frontend import CommandLineInterface

APP_DIR = "kairos"
LOCALES = ("sr_RS",)
OUTPUT_DIR = "locales"
TEMPLATE = os.path.join(OUTPUT_DIR, f"{APP_DIR}.pot")


def main(argv):
    modes = {
        "extract": extract_locales,
        "init": init_locales,
        "update": update_locales,
        "compile": compile_locales,
    }

    def show_help():
        print("make_locales.py -m <mode>\nAllowable modes: " + ", ".join(modes))

    try:
        opts, args = getopt.getopt(argv, "hm:", ["help", "mode="])
    except getopt.GetoptError:
        show_help()
        sys.exit(2)

    mode = None
    for opt, arg in opts:
        if opt in ("-h", "--help"):
            show_help()
            sys.exit()
        elif opt in ("-m", "--mode"):
            mode = arg

    if mode not in modes:
        show_help()
        sys.exit(2)
    modes[mode]()


def extract_locales():
    Path(OUTPUT_DIR).mkdir(parents=True, exist_ok=True)
    CommandLineInterface().run(
        ["pybabel", "extract", "-k", "_T", APP_DIR, "-o", TEMPLATE]
    )


def init_locales():
    for locale in LOCALES:
        CommandLineInterface().run(
            ["pybabel", "init", "-i", TEMPLATE, "-d", OUTPUT_DIR, "-l", locale]
        )


def update_locales():
    CommandLineInterface().run(["pybabel", "update", "-i", TEMPLATE, "-d", OUTPUT_DIR])


def compile_locales():
    CommandLineInterface().run(
        ["pybabel", "compile", "-d", OUTPUT_DIR, "--statistics"]
    )


if __name__ == "__main__":
    main(sys.argv[1:])
