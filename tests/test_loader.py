import logging

from quotes import loader

def writeFile(tmp_path, name, content):
    p = tmp_path / name
    p.write_text(content)
    return str(p)

class TestLoadSymbols:
    def test_comments_blanks_and_bad_lines(self, tmp_path, caplog):
        caplog.set_level(logging.INFO)
        f = writeFile(tmp_path, 'list.txt', '# comment\n\nAVGO\nbadline!!\nINTC # trailing\n')
        assert loader.loadSymbols(f) == ['AVGO', 'INTC']
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert 'line 4' in warnings[0].getMessage()
        assert 'badline!!' in warnings[0].getMessage()

    def test_sorted_unique_and_uppercased(self, tmp_path):
        f = writeFile(tmp_path, 'list.txt', 'intc\n  avgo\nINTC\n   # indented comment\nibm#inline\n')
        assert loader.loadSymbols(f) == ['AVGO', 'IBM', 'INTC']

    def test_last_line_without_newline(self, tmp_path):
        f = writeFile(tmp_path, 'list.txt', 'AVGO\nT')
        assert loader.loadSymbols(f) == ['AVGO', 'T']

    def test_too_long_symbol_is_ignored(self, tmp_path, caplog):
        f = writeFile(tmp_path, 'list.txt', 'GOOGL\nAAPL\n')
        assert loader.loadSymbols(f) == ['AAPL']
        assert 'Ignoring invalid entry on line 1: GOOGL' in caplog.text

    def test_missing_file(self, tmp_path, caplog):
        assert loader.loadSymbols(str(tmp_path / 'nope.txt')) == []
        assert 'Unable to open symbol list file' in caplog.text

    def test_undecodable_byte_in_comment(self, tmp_path, caplog):
        p = tmp_path / 'list.txt'
        p.write_bytes(b'# caf\xe9 stocks\nAVGO\n\xe9tf\n')
        assert loader.loadSymbols(str(p)) == ['AVGO']
        assert 'Ignoring invalid entry on line 3' in caplog.text

    def test_debug_listing(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG)
        f = writeFile(tmp_path, 'list.txt', '# x\nAVGO\n')
        loader.loadSymbols(f)
        assert 'Skipped line 1: # x' in caplog.text
        assert 'Loaded 1 symbols from' in caplog.text
        assert '>>> AVGO' in caplog.text

class TestLoadServiceKey:
    def test_last_key_wins(self, tmp_path):
        f = writeFile(tmp_path, 'key.txt', '# note\nKEY1\n\nKEY2\n')
        assert loader.loadServiceKey(f) == 'KEY2'

    def test_trailing_blank_lines_and_comments(self, tmp_path):
        f = writeFile(tmp_path, 'key.txt', 'pk_abc123  \n\n   \n# old key below\n#pk_old\n')
        assert loader.loadServiceKey(f) == 'pk_abc123'

    def test_undecodable_byte_in_comment(self, tmp_path):
        p = tmp_path / 'key.txt'
        p.write_bytes(b'# cl\xe9\npk_x\n')
        assert loader.loadServiceKey(str(p)) == 'pk_x'

    def test_no_key(self, tmp_path, caplog):
        f = writeFile(tmp_path, 'key.txt', '# only a comment\n\n')
        assert loader.loadServiceKey(f) is None
        assert 'No service key found' in caplog.text

    def test_missing_file(self, tmp_path, caplog):
        assert loader.loadServiceKey(str(tmp_path / 'IEXApiKey.txt')) is None
        assert 'Unable to open service key file' in caplog.text
