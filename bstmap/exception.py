class BSTMapError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class InvalidPrintModeError(BSTMapError):
    def __str__(self):
        return "invalid print mode: " + ''.join(map(str, self.args))

class ParseError(BSTMapError):
    pass

class FileParseError(BSTMapError):
    def __init__(self, filename, line, msg):
        super(FileParseError, self).__init__(filename, line, msg)
        self.filename = filename
        self.line = line
        self.msg = msg
    def __str__(self):
        return self.filename + ':' + str(self.line) + ": " + str(self.msg)
