# -*- encoding: utf-8 -*-

from imgdelegate.meta_identifier import MetaIdentifier, MetaIdentifierCodec


class CustomDelegate(object):

    context = None

    def deserialize_meta_identifier(self, meta_identifier):
        return MetaIdentifierCodec().decode(meta_identifier).to_dict()

    def serialize_meta_identifier(self, components):
        return MetaIdentifierCodec().encode(MetaIdentifier.from_dict(components))

    def authorize_before_access(self):
        identifier = self.context['identifier']
        if identifier == 'allowed.jpg':
            return True
        elif identifier == 'forbidden-boolean.jpg':
            return False
        elif identifier == 'redirect':
            return {'status_code': 303, 'location': 'http://example.org/'}

    def authorize(self):
        identifier = self.context['identifier']
        if identifier == 'allowed.jpg':
            return True
        elif identifier == 'forbidden-boolean.jpg':
            return False
        elif identifier == 'redirect':
            return {'location': 'http://example.org/', 'status_code': 303}
        elif identifier == 'error':
            raise RuntimeError('Error')

    def customize_iiif1_information_response(self, info):
        info['new_key'] = 'new value'

    def customize_iiif2_information_response(self, info):
        info['new_key'] = 'new value'

    def customize_iiif3_information_response(self, info):
        info['new_key'] = 'new value'

    def source(self):
        if self.context['identifier'] == 'bogus':
            return None
        return 'FilesystemSource'

    def filesystemsource_pathname(self):
        if self.context['identifier'] == 'missing':
            return None
        return self.context['identifier']

    def httpsource_resource_info(self):
        identifier = self.context['identifier']
        if identifier == 'string':
            return 'http://example.org/foxes'
        elif identifier == 'hash':
            return {'uri': 'http://example.org/birds'}

    def overlay(self):
        identifier = self.context['identifier']
        if identifier == 'image':
            return {
                'image': '/dev/cats',
                'inset': 5,
                'position': 'bottom left',
            }
        elif identifier == 'string':
            return {
                'background_color': 'rgba(12, 23, 34, 45)',
                'string': 'dogs\ndogs',
                'inset': 5,
                'position': 'bottom left',
                'color': 'red',
                'font': 'SansSerif',
                'font_size': 20,
                'font_min_size': 11,
                'font_weight': 1.5,
                'glyph_spacing': 0.1,
                'stroke_color': 'blue',
                'stroke_width': 3,
                'word_wrap': False,
            }

    def redactions(self):
        identifier = self.context['identifier']
        if identifier == 'empty':
            return []
        elif identifier == 'redacted':
            return [
                {'x': 0, 'y': 10, 'width': 50, 'height': 70, 'color': 'black'}
            ]

    def metadata(self):
        if self.context['identifier'] == 'metadata':
            return '<rdf:RDF>variant metadata</rdf:RDF>'
        return None

    def log_something(self):
        logger.info('Hello from the delegate')
        return logger.name
