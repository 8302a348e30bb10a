import logging
from sinum.DEFAULTS import DEFAULTS

_LEVELS = {
    # Above CRITICAL, nothing gets through
    'silent': logging.CRITICAL + 1,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


class makeLager:
    """
    Console logger of sinum.

    Value normalizations (kilogram to gram, shorten) and translation
    fallbacks are reported at debug level. Broken unit or locale tables are
    reported through `critical`, which aborts with a RuntimeError.
    """

    def __init__(self, name='sinum', log_level='warning'):
        self.logger = logging.getLogger(name)

        # Reuse the handler when the module is reloaded
        if self.logger.handlers:
            self.console_handler = self.logger.handlers[0]
        else:
            self.console_handler = logging.StreamHandler()
            self.console_handler.setFormatter(
                logging.Formatter('%(levelname)s - %(message)s'))
            self.logger.addHandler(self.console_handler)

        self.set_level(log_level)

    def set_level(self, level):
        """
        Set the logging level.

        Args:
            level (str or int): 'silent', 'debug', 'info', 'warning', 'error',
                                'critical' or a numeric logging level.
                                Unknown names fall back to 'warning'.
        """
        if isinstance(level, str):
            level = _LEVELS.get(level.lower(), logging.WARNING)

        self.logger.setLevel(level)
        self.console_handler.setLevel(level)

    @property
    def level(self):
        return self.logger.level

    def debug(self, msg):
        self.logger.debug(msg)

    def critical(self, msg):
        """
        Log `msg` and abort.

        Raises:
            RuntimeError: Always, after logging the message.
        """
        self.logger.critical(msg)
        raise RuntimeError(
            "A critical error has occurred in sinum. Please check the log "
            "messages above for details."
        )


logger = makeLager(log_level=DEFAULTS.log_level)
