# -*- encoding: utf-8 -*-

from enum import Enum


class DelegateMethod(Enum):
    """
    The delegate methods recognized by imgdelegate.  Scripts may define other
    methods of their own, which can be called with ``ScriptDelegate.invoke()``.
    """
    AUTHORIZE = 'authorize'
    AUTHORIZE_BEFORE_ACCESS = 'authorize_before_access'
    CUSTOMIZE_IIIF1_INFORMATION_RESPONSE = 'customize_iiif1_information_response'
    CUSTOMIZE_IIIF2_INFORMATION_RESPONSE = 'customize_iiif2_information_response'
    CUSTOMIZE_IIIF3_INFORMATION_RESPONSE = 'customize_iiif3_information_response'
    DESERIALIZE_META_IDENTIFIER = 'deserialize_meta_identifier'
    FILESYSTEMSOURCE_PATHNAME = 'filesystemsource_pathname'
    HTTPSOURCE_RESOURCE_INFO = 'httpsource_resource_info'
    METADATA = 'metadata'
    OVERLAY = 'overlay'
    REDACTIONS = 'redactions'
    SERIALIZE_META_IDENTIFIER = 'serialize_meta_identifier'
    SOURCE = 'source'

    def __str__(self):
        return self.value
