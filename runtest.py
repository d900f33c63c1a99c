#!.venv/bin/python

# Run as python -m runtest

import logging
import os
import sys
import unittest

from okcontrast.config import environment_log_level


if __name__ == "__main__":
    stream = sys.stdout

    def println(s: str = "") -> None:
        if s:
            stream.write(s)
        stream.write("\n")
        stream.flush()

    println("━━━ 1. Setup")
    println(f"Python:         {sys.executable}")
    println(f"Prefix:         {sys.prefix}")
    println(f"Directory:      {os.getcwd()}")
    println(f"Target level:   {os.environ.get('OKCONTRAST_TARGET_LEVEL', 'n/a')}")
    println(f"Log level:      {os.environ.get('OKCONTRAST_LOG_LEVEL', 'n/a')}")

    logging.basicConfig(stream=sys.stderr, level=environment_log_level())

    println("━━━ 2. Unit Testing")
    runner = unittest.main(
        module="test",
        exit=False,
        testRunner=unittest.TextTestRunner(stream=stream, verbosity=1),
    )
    sys.exit(not runner.result.wasSuccessful())
