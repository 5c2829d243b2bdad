import argparse
import logging
import re

from quotes import config
from quotes import fatal
from quotes import log
from quotes import symbol

# switches take a - or / prefix, short or long spelling, any case
rHelp = re.compile(r'^[-/](\?|h|help)$', re.IGNORECASE)
rDebug = re.compile(r'^[-/](d|debug)$', re.IGNORECASE)
rList = re.compile(r'^[-/](l|list)$', re.IGNORECASE)
rFile = re.compile(r'^[-/](f|file)$', re.IGNORECASE)
rRaw = re.compile(r'^[-/](r|raw)$', re.IGNORECASE)
rSwitch = re.compile(r'^[-/]')

def usageParser(options):
    p = argparse.ArgumentParser(prog=config.programName(), prefix_chars='-/', add_help=False,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description='Retrieve a price quote for one or more specified stock symbols.',
            epilog='Switches may start with - or / and are not case sensitive.')
    p.add_argument('-d', '-debug', action='store_true', help='Enable debug mode.')
    p.add_argument('-h', '-help', '-?', action='store_true', help='Display help & usage text.')
    p.add_argument('-l', '-list', action='store_true',
            help='Report on stock symbols listed one per line in a file. The default file name is {}. '
                 'See the -file switch to specify a list file name.'.format(options.listFileName))
    p.add_argument('-f', '-file', metavar='NAME',
            help='Name of the file to load a list of stock symbols from. Implies -list.')
    p.add_argument('-r', '-raw', action='store_true',
            help='Display the raw data from the query response. Only valid when directly specifying a '
                 'single stock symbol on the command line, no effect with -list or -file.')
    p.add_argument('AAAA', nargs='*',
            help='A stock symbol to report on: 1 to 4 A-Z characters (case insensitive). '
                 'Multiple symbols may be given.')
    return p

def usage(options):
    return usageParser(options).format_help()

# returns (options, symbols); symbols are validated but not yet sorted or unique
def processCmdLine(argv, options=None):
    if options is None:
        options = config.RunOptions()
    symbols = []

    # help wins over everything else, wherever it is
    for arg in argv:
        if rHelp.match(arg):
            fatal.usageAndExit(usage(options), 0)

    # debug is pulled out before anything else is looked at
    args = []
    for arg in argv:
        if rDebug.match(arg):
            if not options.debug:
                options.debug = True
                log.setDebug(True)
                logging.info('Debug mode is enabled')
            continue
        args.append(arg)

    if not args:
        fatal.usageAndExit(usage(options), 2)

    i = 0
    while i < len(args):
        arg = args[i]
        if rList.match(arg):
            options.loadList = True
        elif rFile.match(arg):
            if i + 1 >= len(args):
                logging.error('No value found after %s switch', arg)
                options.listFileName = ''
            else:
                i += 1
                options.listFileName = args[i]
                options.loadList = True
        elif rRaw.match(arg):
            options.rawData = True
            logging.info('Raw data mode is enabled')
        elif rSwitch.match(arg):
            logging.error('Unrecognized switch "%s"', arg)
        elif symbol.isSymbol(arg):
            s = symbol.validate(arg)
            symbols.append(s)
            logging.debug("Added '%s' to stock symbol list", s)
        else:
            logging.error('Unrecognized argument "%s"', arg)
        i += 1

    # raw output only makes sense for one symbol given directly
    if options.loadList:
        options.rawData = False
        logging.warning('Raw data mode was overridden by other options')

    logging.debug('options: %s', options)
    return options, symbols
