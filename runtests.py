#!/usr/bin/env python

import argparse
import sys

from django.core.management import execute_from_command_line

from heroes.test import environment


def make_parser():
    parser = argparse.ArgumentParser()
    environment.add_arguments(parser.add_argument)
    return parser


def runtests():
    args, rest = make_parser().parse_known_args()
    environment.prepare(
        deprecation=args.deprecation,
        postgres=args.postgres,
        show_logs=args.show_logs,
    )

    try:
        execute_from_command_line([sys.argv[0], "test"] + rest)
    finally:
        environment.cleanup()


if __name__ == "__main__":
    runtests()
