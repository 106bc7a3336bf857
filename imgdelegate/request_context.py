# -*- encoding: utf-8
"""
`request_context` -- The values handed to delegate methods
==========================================================
"""

import attr

from imgdelegate.meta_identifier import MetaIdentifierCodec


@attr.s(slots=True)
class RequestContext(object):
    """
    Describes the request that a delegate is being invoked for.  Delegate
    scripts see it as a read-only dict (see ``to_dict()``), in which only the
    keys with a value are present.

    Slots:
        identifier (str): the identifier decoded from ``meta_identifier``
        meta_identifier (str): the identifier as it appeared in the request
        page_number (int)
        scale_constraint ((int, int))
        client_ip (str)
        cookies (dict)
        request_headers (dict)
        request_uri (str)
        full_size (dict): ``{'width': ..., 'height': ...}`` of the source image
        resulting_size (dict): the same, for the image being returned
        operations ([dict]): the image operations being applied
    """
    identifier = attr.ib(default=None)
    meta_identifier = attr.ib(default=None)
    page_number = attr.ib(default=None)
    scale_constraint = attr.ib(default=None)
    client_ip = attr.ib(default=None)
    cookies = attr.ib(default=attr.Factory(dict))
    request_headers = attr.ib(default=attr.Factory(dict))
    request_uri = attr.ib(default=None)
    full_size = attr.ib(default=None)
    resulting_size = attr.ib(default=None)
    operations = attr.ib(default=None)

    @classmethod
    def from_request(cls, request, meta_identifier, codec=None):
        """
        Args:
            request (werkzeug.wrappers.Request):
                The incoming request
            meta_identifier (str):
                The flat identifier taken from the request path
            codec (MetaIdentifierCodec):
                Used to decode ``meta_identifier``
        Raises:
            MalformedMetaIdentifier if the identifier can't be decoded.
        """
        context = cls(
            client_ip=request.remote_addr,
            cookies=dict(request.cookies),
            request_headers=dict(request.headers),
            request_uri=request.url,
        )
        if codec is None:
            codec = MetaIdentifierCodec()
        context.set_meta_identifier(codec.decode(meta_identifier), codec)
        # Keep the string exactly as the client sent it.
        context.meta_identifier = meta_identifier
        return context

    def set_meta_identifier(self, meta_identifier, codec=None):
        if codec is None:
            codec = MetaIdentifierCodec()
        self.identifier = meta_identifier.identifier
        self.page_number = meta_identifier.page_number
        self.scale_constraint = meta_identifier.scale_constraint
        self.meta_identifier = codec.encode(meta_identifier)

    def to_dict(self):
        d = {}
        for a in attr.fields(RequestContext):
            value = getattr(self, a.name)
            if value is not None:
                d[a.name] = value
        if self.scale_constraint is not None:
            d['scale_constraint'] = list(self.scale_constraint)
        return d
