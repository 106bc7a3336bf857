# -*- encoding: utf-8 -*-

class ImgDelegateException(Exception):
    """Base exception class for all errors raised by imgdelegate."""
    pass


class MalformedMetaIdentifier(ImgDelegateException):
    """Raised when a flat meta-identifier can't be decoded."""
    pass


class DelegateException(ImgDelegateException):
    """Raised when the delegate script can't be loaded or a hook fails."""
    pass


class ConfigError(ImgDelegateException):
    """Raised for errors in the user config."""
    pass
