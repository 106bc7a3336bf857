# -*- encoding: utf-8 -*-

from logging import getLogger
import os
from threading import Event, Thread

from imgdelegate.delegate_exception import DelegateException

logger = getLogger(__name__)


class ScriptWatcher(Thread):
    """
    Watches a delegate script for changes, and reloads it when it has changed.
    """

    def __init__(self, script, interval=1.0):
        super(ScriptWatcher, self).__init__(name='ScriptWatcher')
        self.daemon = True
        self.script = script
        self.interval = interval
        self._stop_event = Event()
        self._script_exists = True

    def run(self):
        logger.debug('Watching %s every %ss', self.script.pathname, self.interval)
        while not self._stop_event.wait(self.interval):
            self.check()

    def stop(self):
        self._stop_event.set()

    def check(self):
        """
        Checks the script once.

        Returns:
            bool: whether the script was reloaded
        """
        if not os.path.exists(self.script.pathname):
            if self._script_exists:
                logger.warning(
                    'Delegate script no longer exists: %s', self.script.pathname
                )
                self._script_exists = False
            return False

        self._script_exists = True
        try:
            return self.script.reload_if_changed()
        except IOError as e:
            logger.error('Failed to read %s: %s', self.script.pathname, e)
        except DelegateException as e:
            logger.error('%s', e)
        return False
