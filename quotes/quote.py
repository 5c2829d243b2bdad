# one record of a batch quote reply; a field the service left out or sent as
# null stays None, which is different from a price of 0
class Quote:
    symbol: str = None
    open: float = None
    high: float = None
    low: float = None
    close: float = None
    latestPrice: float = None
    companyName: str = None
    raw: dict = None

    def __init__(self, s=None, o=None, h=None, l=None, c=None, p=None, n=None, raw=None):
        self.symbol = s
        self.open = o
        self.high = h
        self.low = l
        self.close = c
        self.latestPrice = p
        self.companyName = n
        self.raw = raw if raw is not None else {}

    def __repr__(self):
        pieces = []
        for k, v in self.__dict__.items():
            if k == 'raw':
                continue
            pieces.append('{}:{}'.format(k, v))
        return ', '.join(pieces)

def price(v):
    # booleans are ints to python but are not prices
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return float(v)

def text(v):
    if v is None:
        return None
    return str(v)

def fromJson(q):
    return Quote(text(q.get('symbol')), price(q.get('open')), price(q.get('high')), price(q.get('low')),
            price(q.get('close')), price(q.get('latestPrice')), text(q.get('companyName')), raw=q)

def fromResponse(decoded):
    if not isinstance(decoded, list):
        raise ValueError('expected a list of quotes, got {}'.format(type(decoded).__name__))
    quotes = []
    for q in decoded:
        if not isinstance(q, dict):
            raise ValueError('expected a quote mapping, got {}'.format(type(q).__name__))
        quotes.append(fromJson(q))
    return quotes
