import logging
import os
import sys
import yaml

defaultListFileName = 'StockSymbolList.txt'
defaultKeyFileName = 'IEXApiKey.txt'
defaultConfigFileName = 'StockQuotes.yaml'
defaultBaseUrl = 'https://api.iex.cloud/v1/data/CORE/QUOTE'
defaultTimeout = 10

# options for a single invocation, only changed while parsing the command line
class RunOptions:
    debug: bool = False
    loadList: bool = False
    rawData: bool = False
    listFileName: str = defaultListFileName
    keyFileName: str = defaultKeyFileName

    def __init__(self, listFileName=defaultListFileName, keyFileName=defaultKeyFileName):
        self.debug = False
        self.loadList = False
        self.rawData = False
        self.listFileName = listFileName
        self.keyFileName = keyFileName

    def __repr__(self):
        pieces = []
        for k, v in self.__dict__.items():
            pieces.append('{}:{}'.format(k, v))
        return ','.join(pieces)

# quote service settings
class Config:
    baseUrl: str
    timeout: int

    def __init__(self, baseUrl=defaultBaseUrl, timeout=defaultTimeout):
        self.baseUrl = baseUrl
        self.timeout = timeout

    def __repr__(self):
        pieces = []
        for k, v in self.__dict__.items():
            pieces.append('{}:{}'.format(k, v))
        return ','.join(pieces)

    def processConfig(self, conf):
        iex = (conf or {}).get('iex') or {}
        if iex.get('baseUrl'):
            self.baseUrl = iex['baseUrl'].rstrip('/')
        if iex.get('timeout') is not None:
            self.timeout = iex['timeout']
        logging.debug('config: %s', self)

# the file is optional, without it the built in service settings are used
def getConfig(configFile):
    conf = Config()
    if not os.path.exists(configFile):
        return conf
    with open(configFile, 'r') as f:
        conf.processConfig(yaml.safe_load(f))
    return conf

def programDir():
    return os.path.dirname(os.path.abspath(sys.argv[0]))

def programName():
    return os.path.basename(sys.argv[0]) or 'stockQuotes'

def resolve(baseDir, fileName):
    return os.path.join(baseDir, fileName)
