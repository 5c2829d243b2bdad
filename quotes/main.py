import logging
import requests
import sys

from quotes import cmdline
from quotes import config
from quotes import loader
from quotes import log
from quotes import quote
from quotes import request
from quotes import symbol
from quotes import table

def run(options, symbols, baseDir):
    symbols = symbol.add(symbols)

    if options.loadList:
        symbols = symbol.merge(symbols, loader.loadSymbols(config.resolve(baseDir, options.listFileName)))

    if not symbols:
        logging.error('No stock symbols found or provided')
        return 1

    keyFile = config.resolve(baseDir, options.keyFileName)
    key = loader.loadServiceKey(keyFile)
    if not key:
        logging.error('A service access key is required, see key file %s', keyFile)
        return 1

    req = request.Request(config.getConfig(config.resolve(baseDir, config.defaultConfigFileName)))
    try:
        decoded = req.quotes(symbols, key)
        quotes = quote.fromResponse(decoded)
    except request.QuoteServiceError as e:
        logging.error('The quote service request returned unsuccessful status code %d', e.status)
        logging.error('Service response - %s', e.body)
        if e.isClientError():
            logging.error('See key file %s to ensure your service access key is valid', keyFile)
        return 1
    except ValueError as e:
        logging.error('Unable to decode the quote service response: %s', e)
        return 1
    except requests.RequestException as e:
        logging.error('The quote service request failed: %s', e)
        return 1

    logging.debug('Quote Count = %d', len(quotes))
    table.show(quotes, options.rawData)
    return 0

def main(argv=None, baseDir=None):
    if argv is None:
        argv = sys.argv[1:]
    if baseDir is None:
        baseDir = config.programDir()
    log.setupLogging()
    options, symbols = cmdline.processCmdLine(argv)
    return run(options, symbols, baseDir)
