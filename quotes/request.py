import logging
import requests

from quotes.config import Config

class QuoteServiceError(RuntimeError):
    status: int
    body: str

    def __init__(self, status, body):
        super().__init__('got a non-200: {}'.format(status))
        self.status = status
        self.body = body

    def isClientError(self):
        return 400 <= self.status < 500

# https://api.iex.cloud/v1/data/CORE/QUOTE/AVGO,INTC,?token=...
# the trailing comma after the last symbol is kept, the service expects it
def buildUrl(symbols, key, baseUrl):
    if not symbols:
        raise ValueError('a symbol is required')
    symbolList = ''.join(s + ',' for s in symbols)
    logging.debug('Symbol List = %s', symbolList)
    url = '{}/{}?token={}'.format(baseUrl, symbolList, key)
    logging.debug('URL = %s', url)
    return url

class Request:
    config: Config

    def __init__(self, c):
        self.config = c

    def __repr__(self):
        pieces = []
        for k, v in self.__dict__.items():
            pieces.append('{}:{}'.format(k, v))
        return ','.join(pieces)

    def makeRequest(self, url):
        r = requests.get(url, timeout=self.config.timeout)
        logging.debug('GET request status = %d', r.status_code)
        if r.status_code != 200:
            raise QuoteServiceError(r.status_code, r.text)
        return r.json()

    def quotes(self, symbols, key):
        return self.makeRequest(buildUrl(symbols, key, self.config.baseUrl))
