# -*- encoding: utf-8 -*-
"""
`delegate` -- Invoke the methods of a delegate script
=====================================================
"""

from datetime import datetime
from logging import getLogger
import types

from imgdelegate.config import (
    configure_logging, default_config_file_path, read_config
)
from imgdelegate.delegate_exception import ConfigError, DelegateException
from imgdelegate.delegate_method import DelegateMethod
from imgdelegate.meta_identifier import MetaIdentifier, MetaIdentifierCodec
from imgdelegate.script import DelegateScript, locate_script
from imgdelegate.script_watcher import ScriptWatcher

logger = getLogger(__name__)

# The name of the attribute of the delegate object that holds the context.
CONTEXT_ATTRIBUTE = 'context'


def _describe_args(args):
    if not args:
        return 'none'
    return ', '.join(type(a).__name__ for a in args)


class ScriptDelegate(object):
    """
    Wraps one ``CustomDelegate`` instance, which serves a single request.

    The typed methods of this class call the delegate method of the same
    purpose, and normalize what it returns into the shapes the host expects.
    """

    def __init__(self, script, codec=None):
        self.script = script
        self.codec = codec or MetaIdentifierCodec()
        self._delegate = script.instantiate()
        self._request_context = None

    @property
    def request_context(self):
        return self._request_context

    @request_context.setter
    def request_context(self, context):
        # The script gets a read-only view; it mustn't change the request.
        view = types.MappingProxyType(context.to_dict())
        try:
            setattr(self._delegate, CONTEXT_ATTRIBUTE, view)
        except AttributeError as e:
            raise DelegateException(
                'Delegate does not accept a %r attribute' % (CONTEXT_ATTRIBUTE,)
            ) from e
        self._request_context = context

    def has_method(self, method):
        return callable(getattr(self._delegate, str(method), None))

    def invoke(self, method, *args):
        """
        Calls a method of the delegate.

        Args:
            method (DelegateMethod or str):
                The method to call
        Returns:
            Whatever the method returned.  It shouldn't be modified.
        Raises:
            DelegateException if the delegate doesn't have the method, or if
            the method raised an error.
        """
        name = str(method)
        args_list = _describe_args(args)
        logger.debug('Invoking %s() with args: (%s)', name, args_list)

        func = getattr(self._delegate, name, None)
        if not callable(func):
            raise DelegateException('Delegate has no %s() method' % (name,))

        start = datetime.now()
        try:
            retval = func(*args)
        except Exception as e:
            raise DelegateException('%s() raised %r' % (name, e)) from e

        logger.debug('%s() returned a %s for args: (%s) in %s',
            name, type(retval).__name__, args_list, datetime.now() - start)
        return retval

    def authorize(self):
        """
        Returns:
            True/False to allow/deny the request, or a dict with ``status_code``
            and ``location`` keys to redirect it.
        """
        return self.invoke(DelegateMethod.AUTHORIZE)

    def authorize_before_access(self):
        return self.invoke(DelegateMethod.AUTHORIZE_BEFORE_ACCESS)

    def customize_iiif1_information_response(self, info):
        self.invoke(DelegateMethod.CUSTOMIZE_IIIF1_INFORMATION_RESPONSE, info)

    def customize_iiif2_information_response(self, info):
        self.invoke(DelegateMethod.CUSTOMIZE_IIIF2_INFORMATION_RESPONSE, info)

    def customize_iiif3_information_response(self, info):
        self.invoke(DelegateMethod.CUSTOMIZE_IIIF3_INFORMATION_RESPONSE, info)

    def deserialize_meta_identifier(self, meta_identifier):
        """
        Decodes a flat meta-identifier with the delegate, or with the
        built-in codec if the delegate doesn't handle it.

        Returns:
            MetaIdentifier
        """
        method = DelegateMethod.DESERIALIZE_META_IDENTIFIER
        if self.has_method(method):
            result = self.invoke(method, meta_identifier)
            if result is not None:
                try:
                    return MetaIdentifier.from_dict(result)
                except (KeyError, TypeError, ValueError) as e:
                    raise DelegateException(
                        '%s() returned an invalid meta-identifier: %r' %
                        (method, result)
                    ) from e
        return self.codec.decode(meta_identifier)

    def serialize_meta_identifier(self, meta_identifier):
        method = DelegateMethod.SERIALIZE_META_IDENTIFIER
        if self.has_method(method):
            result = self.invoke(method, meta_identifier.to_dict())
            if isinstance(result, str):
                return result
            elif result is not None:
                raise DelegateException(
                    '%s() returned a %s, expected a str' %
                    (method, type(result).__name__)
                )
        return self.codec.encode(meta_identifier)

    def filesystem_source_pathname(self):
        """
        Returns:
            str, or None if there's no such file.
        """
        return self.invoke(DelegateMethod.FILESYSTEMSOURCE_PATHNAME)

    def http_source_resource_info(self):
        """
        Returns:
            dict with at least a ``uri`` key, or an empty dict if there's no
            such resource.
        """
        result = self.invoke(DelegateMethod.HTTPSOURCE_RESOURCE_INFO)
        if isinstance(result, str):
            return {'uri': result}
        elif isinstance(result, dict):
            return result
        return {}

    def metadata(self):
        return self.invoke(DelegateMethod.METADATA)

    def overlay_properties(self):
        result = self.invoke(DelegateMethod.OVERLAY)
        if result is not None:
            return result
        return {}

    def redactions(self):
        result = self.invoke(DelegateMethod.REDACTIONS)
        if result is not None:
            return tuple(result)
        return ()

    def source(self):
        """
        Returns:
            The name of the source to use, or None if there's no such image.
        """
        return self.invoke(DelegateMethod.SOURCE)


class ScriptDelegateFactory(object):
    """
    Owns the delegate script and the watcher that reloads it, and creates
    the delegates that requests are served with.

    The config dictionary MUST contain
     * `script_pathname`, the absolute path or file name of the script.

    The config dictionary MAY contain
     * `script_search_dirs`, directories in which to look for the script when
        `script_pathname` is a file name.
     * `watch_script`, whether to reload the script when it changes (default
        True).
     * `watch_interval`, how often in seconds to check it (default 1.0).
    """

    def __init__(self, config):
        self.config = config
        pathname = config.get('script_pathname', '')
        if not pathname or not pathname.strip():
            raise ConfigError('delegate.script_pathname is not set')
        search_dirs = config.get('script_search_dirs', [])
        self.script = DelegateScript(locate_script(pathname, search_dirs))
        self.watch_script = config.get('watch_script', True)
        self.watch_interval = config.get('watch_interval', 1.0)
        self.watcher = None

    def start(self):
        logger.info('Loading delegate script %s', self.script.pathname)
        self.script.load_file()
        if self.watch_script:
            self.watcher = ScriptWatcher(self.script, self.watch_interval)
            self.watcher.start()

    def stop(self):
        if self.watcher is not None:
            self.watcher.stop()
            self.watcher.join()
            self.watcher = None

    def new_delegate(self, context=None):
        delegate = ScriptDelegate(self.script)
        if context is not None:
            delegate.request_context = context
        return delegate


def create_delegate_factory(config_file_path=''):
    if not config_file_path:
        config_file_path = default_config_file_path()
    config = read_config(config_file_path)

    configure_logging(config['logging'])
    logger.debug('imgdelegate configured with these settings:')
    for key in config:
        if key == 'DEFAULT':
            continue
        for sub_key in config[key]:
            logger.debug('%s.%s=%s', key, sub_key, config[key][sub_key])

    return ScriptDelegateFactory(config['delegate'])
