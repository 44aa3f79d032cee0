"""Adapters from the log_callback(message, **flags) convention to real log sinks."""
import logging


def _level_for(error=False, warning=False, info=False, debug=False, **_):
    if error:
        return 'error'
    if warning:
        return 'warn'
    if debug:
        return 'debug'
    return 'info'


def host_log_callback(host_log):
    """Wrap the mod manager's ``log(message, level)`` function."""
    def log(message, **kwargs):
        host_log(message, _level_for(**kwargs))
    return log


def logger_callback(logger=None):
    """Route log_callback messages to a standard library logger."""
    logger = logger or logging.getLogger('atlyss_extension')
    levels = {
        'error': logging.ERROR,
        'warn': logging.WARNING,
        'info': logging.INFO,
        'debug': logging.DEBUG,
    }

    def log(message, **kwargs):
        logger.log(levels[_level_for(**kwargs)], message)
    return log
