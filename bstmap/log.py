import sys
import os

LOG_FATAL = -2
LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

def fatal_exit(exitcode, *msg):
    logger.do_log(LOG_FATAL, os.path.basename(sys.argv[0]), ": fatal: ", *msg)
    sys.exit(exitcode)

def fatal(*msg):
    fatal_exit(1, *msg)

def warn(*msg):
    logger.do_log(LOG_WARN, "warning: ", *msg)

def error(*msg):
    logger.do_log(LOG_ERROR, "error: ", *msg)

def info(*msg):
    logger.do_log(LOG_INFO, *msg)

def debug1(*msg):
    logger.do_log(LOG_DEBUG1, *msg)

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)

RESET = '\033[0m'

# escape sequence per log level; levels without an entry stay uncolored
LEVEL_COLORS = {
        LOG_FATAL : '\033[1;31m',
        LOG_ERROR : '\033[1;31m',
        LOG_WARN  : '\033[1;33m',
        LOG_DEBUG1: '\033[36m',
        LOG_DEBUG2: '\033[36m',
        LOG_DEBUG3: '\033[36m',
    }


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        # None writes to whatever sys.stderr currently is
        self._file = logfile
        self.set_colors(colors)

    @property
    def file(self):
        return self._file if self._file is not None else sys.stderr

    def set_colors(self, preference):
        if preference == 'always':
            use_colors = True
        elif preference == 'auto':
            use_colors = self.file.isatty()
        elif preference == 'never':
            use_colors = False
        else:
            raise ValueError
        self._colormap = LEVEL_COLORS if use_colors else {}

    def enabled(self, level):
        return self.loglevel >= level or level <= LOG_FATAL

    def _write_log(self, msg):
        self.file.write(msg)

    def _colorize_msg(self, level, *msg):
        color = self._colormap.get(level)
        if color is None:
            return msg
        return (color,) + msg + (RESET,)

    def _compile_msg(self, *msg):
        l = list(map(str, msg))
        l.append("\n")
        return ''.join(l)

    def do_log(self, level, *msg):
        if not self.enabled(level):
            return
        msg = self._colorize_msg(level, *msg)
        msg = self._compile_msg(*msg)
        self._write_log(msg)


logger = Logger()
