import logging
import sys

from quotes import config

# diagnostics share stdout with the quote table
def setupLogging(debug=False, name=None):
    if name is None:
        name = config.programName()
    logging.basicConfig(stream=sys.stdout, level=logging.INFO,
            format=name + ' %(levelname)s: %(message)s', force=True)
    setDebug(debug)

def setDebug(debug):
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)
