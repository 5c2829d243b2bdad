import logging
import re

# leading run of 1-4 letters; anything after it is ignored
rSymbol = re.compile(r'^\s*([a-zA-Z]{1,4})')

def validate(token):
    if not isinstance(token, str):
        return None
    m = rSymbol.match(token)
    if m is None:
        return None
    return m.group(1).upper()

def isSymbol(token):
    return validate(token) is not None

# sorted, duplicate free
def unique(symbols):
    return sorted(set(symbols))

def add(tokens, symbols=None):
    out = list(symbols) if symbols is not None else []
    for t in tokens:
        s = validate(t)
        if s is None:
            logging.debug('not a symbol: %s', t)
            continue
        out.append(s)
    return unique(out)

def merge(*sets):
    out = []
    for s in sets:
        out.extend(s)
    return unique(out)
