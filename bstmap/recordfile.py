import re
import gzip

import dns.exception
import dns.name

from . import log
from .exception import FileParseError, ParseError

_comment_pattern = r'^\s*([;#].*)?$'

def _open(filename, mode):
    if filename.endswith(".gz"):
        return gzip.open(filename, mode + 't', encoding="utf-8")
    return open(filename, mode, encoding="utf-8")

def open_input_recordfile(filename, key_parser=None):
    return RecordFile(_open(filename, "r"), filename, key_parser)

def int_key(s):
    try:
        return int(s, 0)
    except ValueError:
        raise ParseError("not an integer: ", s)

def str_key(s):
    return s

def dname_key(s):
    try:
        return dns.name.from_text(s)
    except dns.exception.DNSException as e:
        raise ParseError("invalid domain name: ", s, " (", str(e), ")")

def parser(key_parser=str_key):
    """Returns a function which parses a "key payload" line.

    The payload is everything after the first run of whitespace and may be
    empty.
    """
    p_record = re.compile(r'^\s*(\S+)(?:\s+(.*?))?\s*$')
    def record_from_text(s):
        m = p_record.match(s)
        if m is None:
            return None
        payload = m.group(2) if m.group(2) is not None else ''
        return (key_parser(m.group(1)), payload)
    return record_from_text


class RecordFile(object):
    def __init__(self, f, filename, key_parser=None):
        self.f = f
        self.filename = filename
        self.key_parser = key_parser if key_parser is not None else str_key

    def close(self):
        if self.f is not None:
            self.f.close()
            self.f = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def reader(self):
        log.info("reading records from ", self.filename)
        p_ignore = re.compile(_comment_pattern)
        record_parse = parser(self.key_parser)
        i = 0
        while True:
            i += 1
            try:
                line = self.f.readline()
            except UnicodeDecodeError:
                raise FileParseError(self.filename, i, "invalid encoding")
            if not line:
                break
            if p_ignore.match(line):
                continue
            try:
                record = record_parse(line)
            except ParseError as e:
                raise FileParseError(self.filename, i,
                        "could not parse record key: " + str(e))
            if record is None:
                raise FileParseError(self.filename, i, "invalid file format")
            yield record


def records_from_file(filename, key_parser=None):
    """Read (key, payload) records from a file"""
    with open_input_recordfile(filename, key_parser) as rf:
        return list(rf.reader())
