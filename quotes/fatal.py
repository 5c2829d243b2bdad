import sys

def usageAndExit(text, code=0):
    print('\n' + text)
    sys.exit(code)
