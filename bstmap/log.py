import sys

LOG_FATAL = -2
LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

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


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        self._file = logfile if logfile is not None else sys.stderr
        self.set_colors(colors)

    def set_colors(self, preference):
        if preference == 'always':
            colors = Colors()
        elif preference == 'auto':
            if self._isatty():
                colors = Colors()
            else:
                colors = NoColors()
        elif preference == 'never':
            colors = NoColors()
        else:
            raise ValueError("invalid color preference: " + str(preference))
        self.colors = colors
        self._make_colormap()

    def _isatty(self):
        isatty = getattr(self._file, 'isatty', None)
        return isatty is not None and isatty()

    def _make_colormap(self):
        self._colormap = {
                LOG_WARN  : self.colors.WARN,
                LOG_ERROR : self.colors.ERROR,
                LOG_FATAL : self.colors.ERROR,
                LOG_DEBUG1: self.colors.DEBUG,
                LOG_DEBUG2: self.colors.DEBUG,
                LOG_DEBUG3: self.colors.DEBUG
            }

    def _write_log(self, msg):
        self._file.write(msg)

    def _colorize_msg(self, level, *msg):
        try:
            return self.colors.wrap_list(self._colormap[level], list(msg))
        except KeyError:
            return msg

    def _compile_msg(self, *msg):
        l = list(map(str, msg))
        l.append("\n")
        return ''.join(l)

    def enabled_for(self, level):
        return self.loglevel >= level or level <= LOG_FATAL

    def do_log(self, level, *msg):
        if not self.enabled_for(level):
            return
        msg = self._colorize_msg(level, *msg)
        msg = self._compile_msg(*msg)
        self._write_log(msg)


class NoColors:
    """Palette for streams that are not terminals."""
    RESET = ''
    WARN  = ''
    ERROR = ''
    DEBUG = ''

    def wrap_list(self, color, l):
        return l

class Colors(NoColors):
    RESET = '\033[0m'
    WARN  = '\033[1;33m'
    ERROR = '\033[1;31m'
    DEBUG = '\033[36m'

    def wrap_list(self, color, l):
        l.insert(0, color)
        l.append(self.RESET)
        return l


logger = Logger()
