# -*- encoding: utf-8 -*-
#
# Sample delegate script.
#
# The methods of CustomDelegate are called by the image server to customize
# how requests are handled.  A new instance is created for every request, and
# `self.context` is set to a read-only dict describing the request before any
# method is called.  It contains these keys, when they have a value:
#
#   identifier        the identifier of the requested image
#   meta_identifier   the identifier as it appeared in the URL, which may also
#                     carry a page number and a scale constraint
#   page_number       int
#   scale_constraint  [numerator, denominator]
#   client_ip         str
#   cookies           dict
#   request_headers   dict
#   request_uri       str
#   full_size         {'width': int, 'height': int}
#   resulting_size    {'width': int, 'height': int}
#   operations        list of dicts
#
# `logger` is a standard library logger that writes to the server's log.
#
# deserialize_meta_identifier() and serialize_meta_identifier() may be left
# out, in which case the default identifier[;page][;numerator:denominator]
# format is used.

from imgdelegate.meta_identifier import MetaIdentifier, MetaIdentifierCodec


class CustomDelegate(object):

    context = None

    codec = MetaIdentifierCodec()

    def deserialize_meta_identifier(self, meta_identifier):
        """
        Returns a dict with an `identifier` key, and optionally `page_number`
        and `scale_constraint` keys.
        """
        return self.codec.decode(meta_identifier).to_dict()

    def serialize_meta_identifier(self, components):
        return self.codec.encode(MetaIdentifier.from_dict(components))

    def authorize_before_access(self):
        """
        Called before the source image is accessed.  Returns True to allow the
        request, False to deny it, or a dict with `status_code` and `location`
        keys to redirect it.
        """
        return True

    def authorize(self):
        """
        Called after the source image has been accessed, when more is known
        about it (e.g. `full_size`).  Returns the same as
        authorize_before_access().
        """
        return True

    def customize_iiif1_information_response(self, info):
        pass

    def customize_iiif2_information_response(self, info):
        pass

    def customize_iiif3_information_response(self, info):
        pass

    def source(self):
        """
        Returns the name of the source to read the image from, or None if the
        image doesn't exist.
        """
        return 'FilesystemSource'

    def filesystemsource_pathname(self):
        """
        Returns the path of the source image, or None if it doesn't exist.
        """
        return self.context['identifier']

    def httpsource_resource_info(self):
        """
        Returns a URI, a dict with a `uri` key (and optionally `username`,
        `secret` and `headers` keys), or None if the image doesn't exist.
        """
        return None

    def overlay(self):
        """
        Returns None for no overlay, or a dict describing an image overlay
        (`image`, `inset`, `position`) or a string overlay (`string`, `color`,
        `font`, `font_size`, `font_min_size`, `font_weight`, `glyph_spacing`,
        `stroke_color`, `stroke_width`, `background_color`, `word_wrap`,
        `inset`, `position`).
        """
        return None

    def redactions(self):
        """
        Returns a list of dicts with `x`, `y`, `width`, `height` and `color`
        keys, one per region to redact.
        """
        return []

    def metadata(self):
        """
        Returns an RDF/XML string to embed in the output image, or None.
        """
        return None
