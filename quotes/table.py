import dumper

priceFields = ('open', 'high', 'low', 'close', 'latestPrice')

def header():
    return ('{}  {}   {}       {}       {}        {}      {}     {} \n'.format(
                'ID', 'Symbol', 'Open', 'High', 'Low', 'Close', 'Price', 'Name') +
            '{}  {}   {}    {}    {}    {}    {}   {} '.format(
                '--', '------', '-------', '-------', '-------', '-------', '-------', '-' * 39))

def orZero(v):
    return v if v is not None else 0

def formatRow(n, q):
    prices = [orZero(getattr(q, f)) for f in priceFields]
    return '{:2d}  {:>5}:   ${:6.2f}    ${:6.2f}    ${:6.2f}    ${:6.2f}    ${:6.2f}   {} '.format(
            n, q.symbol if q.symbol is not None else '', *prices,
            q.companyName if q.companyName is not None else ' ')

# raw mode dumps the whole reply record after its row
def render(quotes, raw=False):
    lines = ['', header()]
    for n, q in enumerate(quotes, start=1):
        lines.append(formatRow(n, q))
        if raw:
            lines.append('Raw data for {}:'.format(q.symbol))
            lines.append(dumper.dumps(q.raw))
    return '\n'.join(lines)

def show(quotes, raw=False):
    print(render(quotes, raw))
