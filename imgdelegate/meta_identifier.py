# -*- encoding: utf-8
"""
Utilities for dealing with meta-identifiers.

A meta-identifier is the flat form of an identifier that may also carry a page
number and a scale constraint:

    identifier[;page_number][;numerator:denominator]

e.g. ``cats.tif;3;1:2`` is page 3 of ``cats.tif``, at half its full size.

Nothing in the identifier is escaped, so an identifier that itself ends in
something shaped like ``;3`` or ``;1:2`` will be decoded as having fields it
doesn't actually have.
"""

import re

import attr

from imgdelegate.delegate_exception import MalformedMetaIdentifier


FIELD_SEPARATOR = ';'
SCALE_CONSTRAINT_SEPARATOR = ':'

_PAGE_NUMBER = re.compile(r'[0-9]+')
_SCALE_CONSTRAINT = re.compile(r'([0-9]+):([0-9]+)')


def _check_page_number(instance, attribute, value):
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError('%s must be an int, got %r' % (attribute.name, value))
    if value < 0:
        raise ValueError('%s must not be negative, got %r' % (attribute.name, value))


def _check_scale_constraint(instance, attribute, value):
    if value is None:
        return
    if len(value) != 2:
        raise ValueError(
            '%s must be a (numerator, denominator) pair, got %r' %
            (attribute.name, value)
        )
    for term in value:
        if isinstance(term, bool) or not isinstance(term, int):
            raise TypeError('%s terms must be ints, got %r' % (attribute.name, value))
        if term < 1:
            raise ValueError('%s terms must be positive, got %r' % (attribute.name, value))


def _check_identifier(instance, attribute, value):
    if not isinstance(value, str):
        raise TypeError('%s must be a str, got %r' % (attribute.name, value))
    if not value:
        raise ValueError('%s must not be empty' % (attribute.name,))


@attr.s(slots=True, frozen=True)
class MetaIdentifier(object):
    """The structured form of a meta-identifier."""
    identifier = attr.ib(validator=_check_identifier)
    page_number = attr.ib(default=None, validator=_check_page_number)
    scale_constraint = attr.ib(
        default=None,
        converter=attr.converters.optional(tuple),
        validator=_check_scale_constraint
    )

    def to_dict(self):
        """
        Returns the form passed to and returned from delegate scripts.  Fields
        that aren't set are left out.
        """
        d = {'identifier': self.identifier}
        if self.page_number is not None:
            d['page_number'] = self.page_number
        if self.scale_constraint is not None:
            d['scale_constraint'] = list(self.scale_constraint)
        return d

    @classmethod
    def from_dict(cls, d):
        return cls(
            identifier=d['identifier'],
            page_number=d.get('page_number'),
            scale_constraint=d.get('scale_constraint')
        )


def _strip_trailing_field(value, pattern):
    # Only the segment after the last separator is a candidate.
    head, sep, tail = value.rpartition(FIELD_SEPARATOR)
    if sep:
        match = pattern.fullmatch(tail)
        if match:
            return head, match
    return value, None


class MetaIdentifierCodec(object):
    """
    Converts between flat meta-identifiers and ``MetaIdentifier`` records.
    """

    def encode(self, meta_identifier):
        fields = [meta_identifier.identifier]
        if meta_identifier.page_number is not None:
            fields.append(str(meta_identifier.page_number))
        if meta_identifier.scale_constraint is not None:
            fields.append(SCALE_CONSTRAINT_SEPARATOR.join(
                str(term) for term in meta_identifier.scale_constraint
            ))
        return FIELD_SEPARATOR.join(fields)

    def decode(self, value):
        """
        Structured fields are stripped from the end of the string, the scale
        constraint first and then the page number, each at most once.
        Whatever is left over is the identifier.

        Raises:
            MalformedMetaIdentifier if the string is empty, or if nothing is
            left over for the identifier.
        """
        if not value:
            raise MalformedMetaIdentifier('Empty meta-identifier')

        remainder, match = _strip_trailing_field(value, _SCALE_CONSTRAINT)
        scale_constraint = None
        if match:
            scale_constraint = (int(match.group(1)), int(match.group(2)))
            if min(scale_constraint) < 1:
                # A zero term isn't a ratio; leave it in the identifier.
                remainder, scale_constraint = value, None

        remainder, match = _strip_trailing_field(remainder, _PAGE_NUMBER)
        page_number = int(match.group(0)) if match else None

        if not remainder:
            raise MalformedMetaIdentifier(
                'No identifier in meta-identifier: %r' % (value,)
            )
        return MetaIdentifier(
            identifier=remainder,
            page_number=page_number,
            scale_constraint=scale_constraint
        )


_codec = MetaIdentifierCodec()


def encode_meta_identifier(meta_identifier):
    return _codec.encode(meta_identifier)


def decode_meta_identifier(value):
    return _codec.decode(value)
