# -*- encoding: utf-8 -*-
"""
`script` -- Load delegate scripts
=================================

A delegate script is a Python source file that defines a ``CustomDelegate``
class.  The script is compiled once and shared; a new ``CustomDelegate`` is
created for every request.
"""

from datetime import datetime
import hashlib
from logging import getLogger
import os
from threading import Lock
import types

from imgdelegate.delegate_exception import DelegateException

logger = getLogger(__name__)

DELEGATE_CLASS_NAME = 'CustomDelegate'

# Bound to ``logger`` in the namespace of every delegate script.
SCRIPT_LOGGER_NAME = 'imgdelegate.script'


def locate_script(value, search_dirs=()):
    """
    Returns the absolute path of the script named by ``value``, which may be
    an absolute path or a file name.  File names are looked for in the current
    directory and then in each of ``search_dirs``.
    """
    if os.path.isabs(value):
        return value
    for directory in [os.getcwd()] + list(search_dirs):
        fp = os.path.join(directory, value)
        if os.path.exists(fp):
            return os.path.abspath(fp)
    return os.path.abspath(value)


class DelegateScript(object):

    def __init__(self, pathname=None):
        self.pathname = pathname
        self.checksum = None
        self._module = None
        self._lock = Lock()

    @property
    def is_loaded(self):
        return self._module is not None

    def load(self, code):
        """
        Compiles ``code`` (str, or UTF-8 bytes) and makes it the code used by
        new delegates.  If it can't be loaded, the code loaded before stays in
        use.

        Raises:
            DelegateException
        """
        start = datetime.now()
        logger.debug('Loading script code')
        module = types.ModuleType('delegates')
        module.__file__ = self.pathname or '<delegates>'
        module.logger = getLogger(SCRIPT_LOGGER_NAME)
        try:
            if isinstance(code, bytes):
                code = code.decode('utf8')
            compiled = compile(code, module.__file__, 'exec')
            exec(compiled, module.__dict__)
        except Exception as e:
            raise DelegateException(
                'Failed to load delegate script: %r' % (e,)
            ) from e

        if not isinstance(getattr(module, DELEGATE_CLASS_NAME, None), type):
            raise DelegateException(
                'Delegate script does not define a %s class' % (DELEGATE_CLASS_NAME,)
            )

        with self._lock:
            self._module = module
        duration = datetime.now() - start
        logger.debug('Script code loaded in %s', duration)

    def load_file(self):
        """
        Raises:
            IOError if the script can't be read.
            DelegateException if it can't be loaded.
        """
        with open(self.pathname, 'rb') as f:
            code = f.read()
        self.load(code)
        self.checksum = hashlib.sha1(code).hexdigest()

    def reload_if_changed(self):
        """
        Reloads the script file if its contents are different to what was
        loaded last.  Some filesystems report a single change more than once,
        so comparing checksums avoids loading the same code repeatedly.

        Returns:
            bool: whether the script was reloaded
        """
        with open(self.pathname, 'rb') as f:
            code = f.read()
        checksum = hashlib.sha1(code).hexdigest()
        if checksum == self.checksum:
            logger.debug('Script checksums match; skipping reload')
            return False

        logger.debug('Script checksums differ; reloading')
        # Recorded before loading, so broken code is only reported once.
        self.checksum = checksum
        self.load(code)
        return True

    def instantiate(self):
        with self._lock:
            module = self._module
        if module is None:
            raise DelegateException('No delegate script has been loaded')
        try:
            return getattr(module, DELEGATE_CLASS_NAME)()
        except Exception as e:
            raise DelegateException(
                'Failed to create %s: %r' % (DELEGATE_CLASS_NAME, e)
            ) from e
