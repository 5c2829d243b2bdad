import logging
import re

from quotes import symbol

rBlank = re.compile(r'^\s*$')
rComment = re.compile(r'^\s*#')
# symbol followed by whitespace, an inline comment or the end of the line
rListEntry = re.compile(r'^\s*([a-zA-Z]{1,4})(?:\s|#|$)')

def skipLine(line):
    return rBlank.match(line) is not None or rComment.match(line) is not None

# returns the sorted, unique symbols in the file; an unreadable file gives []
def loadSymbols(fileName):
    try:
        f = open(fileName, 'r', errors='replace')
    except OSError:
        logging.error('Unable to open symbol list file %s', fileName)
        return []

    found = []
    with f:
        for n, line in enumerate(f, start=1):
            if skipLine(line):
                logging.debug('Skipped line %d: %s', n, line.rstrip('\n'))
                continue
            m = rListEntry.match(line)
            if m is None:
                logging.warning('Ignoring invalid entry on line %d: %s', n, line.rstrip('\n'))
                continue
            found.append(symbol.validate(m.group(1)))

    symbols = symbol.unique(found)
    logging.debug('Loaded %d symbols from %s', len(found), fileName)
    for s in symbols:
        logging.debug('    >>> %s', s)
    return symbols

# the last line that is not blank or a comment is the key
def loadServiceKey(fileName):
    try:
        f = open(fileName, 'r', errors='replace')
    except OSError:
        logging.error('Unable to open service key file %s', fileName)
        return None

    key = None
    with f:
        for line in f:
            if not skipLine(line):
                key = line.strip()
    if key is None:
        logging.warning('No service key found in %s', fileName)
    else:
        logging.debug('Quote service key = %s', key)
    return key
